"""
Service layer for holiday records.

Each method performs exactly one MongoDB operation against the
gateway's collection, bounded by ``pymongo.timeout``.  Driver errors
(``PyMongoError``, timeouts included) are logged and re‑raised; the API
layer turns them into generic 500 responses.
"""

from __future__ import annotations

import logging
from typing import List

import pymongo
from bson import ObjectId
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from holiday_calendar_api.app.core.db import StorageGateway
from holiday_calendar_api.app.schemas.holiday import (
    DeleteAcknowledgement,
    Holiday,
    HolidayCreate,
    InsertAcknowledgement,
)


logger = logging.getLogger(__name__)


class HolidayService:
    """Create, list and delete holidays through a ``StorageGateway``."""

    def __init__(
        self,
        gateway: StorageGateway,
        write_timeout: float = 5,
        read_timeout: float = 30,
    ) -> None:
        self.gateway = gateway
        self.write_timeout = write_timeout
        self.read_timeout = read_timeout

    def create_holiday(self, data: HolidayCreate) -> InsertAcknowledgement:
        """Insert a new holiday and return the generated identifier."""
        document = data.to_document()
        logger.info("Decoded holiday: %s", document)
        try:
            with pymongo.timeout(self.write_timeout):
                result = self.gateway.collection.insert_one(document)
        except PyMongoError:
            logger.exception("Error inserting holiday")
            raise
        logger.info("Insert result: inserted_id=%s", result.inserted_id)
        return InsertAcknowledgement(inserted_id=str(result.inserted_id))

    def list_holidays(self) -> List[Holiday]:
        """Return every stored holiday in the collection's natural order.

        Documents that do not decode into ``Holiday`` are skipped and
        logged; they are not reported to the caller.
        """
        holidays: List[Holiday] = []
        skipped = 0
        try:
            with pymongo.timeout(self.read_timeout):
                # Iterating to exhaustion releases the server‑side cursor.
                for document in self.gateway.collection.find({}):
                    try:
                        holidays.append(Holiday.model_validate(document))
                    except ValidationError:
                        skipped += 1
        except PyMongoError:
            logger.exception("Error fetching holidays")
            raise
        if skipped:
            logger.warning("Skipped %d holiday document(s) that could not be decoded", skipped)
        return holidays

    def delete_holiday(self, holiday_id: ObjectId) -> DeleteAcknowledgement:
        """Delete the holiday with ``holiday_id``.

        A missing record is not an error; the acknowledgment then
        reports a count of zero.
        """
        try:
            with pymongo.timeout(self.write_timeout):
                result = self.gateway.collection.delete_one({"_id": holiday_id})
        except PyMongoError:
            logger.exception("Error deleting holiday %s", holiday_id)
            raise
        if result.deleted_count:
            logger.info("Deleted holiday %s", holiday_id)
        return DeleteAcknowledgement(deleted_count=result.deleted_count)
