"""API routes exposing the time conversion table for inspection."""

from fastapi import APIRouter, Depends, Query

from backend.api.deps import get_time_table_mode
from backend.models.time_table import TimeTable, TimeTableDeviation, TimeTableEntry
from conversion import duration
from conversion.config import TimeTableMode

router = APIRouter()


@router.get("/", response_model=TimeTable)
def get_time_table(
    mode: TimeTableMode | None = Query(None, description="legacy or consistent"),
    configured_mode: TimeTableMode = Depends(get_time_table_mode),
) -> TimeTable:
    """Return all 49 factors of the selected time table, row by row."""
    selected = mode or configured_mode
    table = duration.get_table(selected)
    return TimeTable(
        mode=selected,
        units=[unit.value for unit in table.units],
        entries=[
            TimeTableEntry(
                from_unit=source.value,
                to_unit=target.value,
                factor=transform.factor,
            )
            for source, target, transform in table.pairs()
        ],
    )


@router.get("/inconsistencies", response_model=list[TimeTableDeviation])
def list_inconsistencies(
    tolerance: float = Query(1e-9, gt=0, description="Relative tolerance"),
) -> list[TimeTableDeviation]:
    return [
        TimeTableDeviation(
            from_unit=deviation.from_unit.value,
            to_unit=deviation.to_unit.value,
            legacy_factor=deviation.legacy_factor,
            anchored_factor=deviation.anchored_factor,
            relative_error=deviation.relative_error,
        )
        for deviation in duration.find_inconsistencies(tolerance)
    ]
