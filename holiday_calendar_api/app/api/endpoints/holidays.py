"""
Holiday endpoints.

Three routes: create, list and delete.  There is no update route, no
pagination and no authentication.  Failures are reported as a flat
status code with a fixed ``text/plain`` message; storage errors are not
distinguished from one another.

Handlers are plain ``def`` functions so FastAPI runs the blocking
``pymongo`` calls in its thread pool.
"""

from typing import List

from bson import ObjectId
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError

from holiday_calendar_api.app.core.config import (
    DELETE_ERROR_MESSAGE,
    FETCH_ERROR_MESSAGE,
    INSERT_ERROR_MESSAGE,
    INVALID_ID_MESSAGE,
)
from holiday_calendar_api.app.core.db import StorageGateway, get_gateway
from holiday_calendar_api.app.schemas.holiday import (
    DeleteAcknowledgement,
    Holiday,
    HolidayCreate,
    InsertAcknowledgement,
)
from holiday_calendar_api.app.services.holiday_service import HolidayService

router = APIRouter()


def get_holiday_service(
    request: Request,
    gateway: StorageGateway = Depends(get_gateway),
) -> HolidayService:
    settings = request.app.state.settings
    return HolidayService(
        gateway,
        write_timeout=settings.write_timeout,
        read_timeout=settings.read_timeout,
    )


@router.post("", response_model=InsertAcknowledgement)
def create_holiday(
    holiday_in: HolidayCreate,
    service: HolidayService = Depends(get_holiday_service),
):
    """Insert a holiday and return the storage acknowledgment.

    A body that does not decode into ``HolidayCreate`` never reaches
    this function; the application's validation handler answers 400.
    """
    try:
        return service.create_holiday(holiday_in)
    except PyMongoError:
        return PlainTextResponse(INSERT_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("", response_model=List[Holiday], response_model_exclude_defaults=True)
def list_holidays(service: HolidayService = Depends(get_holiday_service)):
    """Return all holidays; an empty collection yields ``[]``."""
    try:
        return service.list_holidays()
    except PyMongoError:
        return PlainTextResponse(FETCH_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.delete("/{holiday_id}", response_model=DeleteAcknowledgement)
def delete_holiday(
    holiday_id: str,
    service: HolidayService = Depends(get_holiday_service),
):
    """Delete a holiday by its 24‑character hex identifier.

    Deleting an identifier that does not exist succeeds with
    ``DeletedCount`` 0.
    """
    if not ObjectId.is_valid(holiday_id):
        return PlainTextResponse(INVALID_ID_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)
    try:
        return service.delete_holiday(ObjectId(holiday_id))
    except PyMongoError:
        return PlainTextResponse(DELETE_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
