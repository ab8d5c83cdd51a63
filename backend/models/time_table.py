"""Schemas describing the time conversion table."""

from pydantic import BaseModel

from conversion.config import TimeTableMode


class TimeTableEntry(BaseModel):
    from_unit: str
    to_unit: str
    factor: float


class TimeTable(BaseModel):
    mode: TimeTableMode
    units: list[str]
    entries: list[TimeTableEntry]


class TimeTableDeviation(BaseModel):
    """A legacy factor that disagrees with the seconds-based anchors."""

    from_unit: str
    to_unit: str
    legacy_factor: float
    anchored_factor: float
    relative_error: float
