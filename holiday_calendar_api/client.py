"""Holiday Calendar API client.

A small wrapper around the three HTTP routes of the service, built on
``requests``.  It plays the role of the browser frontend for scripts
and other Python services:

* :meth:`HolidayClient.list_holidays` – fetch every stored holiday.
* :meth:`HolidayClient.create_holiday` – add a holiday and get its id.
* :meth:`HolidayClient.delete_holiday` – remove a holiday by id.

Every public method returns a tuple ``(data, error)``.  On success
``error`` is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with ``status_code`` and ``message``.  The service reports
failures as plain text, so ``message`` is the response body.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class HolidayClient:
    """Client for the ``/holidays`` resource."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            timeout: Seconds to wait for each response.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and decode the JSON response."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text.strip() if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def list_holidays(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all holidays.

        A ``null`` body is treated the same as an empty list.
        """
        data, error = self._request("GET", "/holidays")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def create_holiday(self, date: str = "", name: str = "") -> Tuple[Optional[str], Optional[Error]]:
        """Create a holiday and return its generated identifier."""
        payload: Dict[str, str] = {}
        if date:
            payload["date"] = date
        if name:
            payload["name"] = name
        data, error = self._request("POST", "/holidays", json_body=payload)
        if error:
            return None, error
        if isinstance(data, dict):
            return data.get("InsertedID"), None
        return None, None

    def delete_holiday(self, holiday_id: str) -> Tuple[int, Optional[Error]]:
        """Delete a holiday and return how many records were removed."""
        data, error = self._request("DELETE", f"/holidays/{holiday_id}")
        if error:
            return 0, error
        if isinstance(data, dict):
            return int(data.get("DeletedCount", 0)), None
        return 0, None
