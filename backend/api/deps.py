"""Shared dependencies for FastAPI routes."""

from fastapi import HTTPException, status

from conversion import ConversionError
from conversion.config import TimeTableMode
from conversion.config import get_time_table_mode as configured_time_table_mode


def get_time_table_mode() -> TimeTableMode:
    """Time table mode set through ``UNIT_CONVERTER_TIME_TABLE``."""
    return configured_time_table_mode()


def as_http_error(exc: ConversionError) -> HTTPException:
    """Translate a core conversion error into a 422 response."""
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=str(exc),
    )
