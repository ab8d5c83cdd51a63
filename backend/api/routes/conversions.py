"""API routes performing a single conversion."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import ValidationError

from backend.api.deps import as_http_error, get_time_table_mode
from backend.models.conversion import ConversionRequest, ConversionResult
from conversion import ConversionError
from conversion import selection
from conversion.config import TimeTableMode
from conversion.units import UnitCategory

router = APIRouter()


@router.get("/", response_model=ConversionResult)
def convert_query(
    category: UnitCategory = Query(..., description="Unit category"),
    value: float = Query(..., description="Value expressed in from_unit"),
    from_unit: str = Query(..., description="Unit to convert from"),
    to_unit: str = Query(..., description="Unit to convert to"),
    time_table: TimeTableMode | None = Query(
        None,
        description="Override the configured time table (time category only)",
    ),
    configured_mode: TimeTableMode = Depends(get_time_table_mode),
) -> ConversionResult:
    """Convert a value passed as query parameters, as the form does on every edit."""
    try:
        request = ConversionRequest(
            category=category,
            value=value,
            from_unit=from_unit,
            to_unit=to_unit,
        )
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=[error["msg"] for error in exc.errors()],
        ) from exc

    return _run_conversion(request, time_table or configured_mode)


@router.post("/", response_model=ConversionResult)
def convert_body(
    request: ConversionRequest,
    time_table: TimeTableMode | None = Query(None),
    configured_mode: TimeTableMode = Depends(get_time_table_mode),
) -> ConversionResult:
    return _run_conversion(request, time_table or configured_mode)


def _run_conversion(request: ConversionRequest, mode: TimeTableMode) -> ConversionResult:
    time_mode = mode if request.category is UnitCategory.TIME else None
    try:
        result = selection.convert_value(
            request.category,
            request.value,
            request.from_unit,
            request.to_unit,
            time_mode=time_mode,
        )
        display = selection.convert(
            request.category,
            request.value,
            request.from_unit,
            request.to_unit,
            time_mode=time_mode,
        )
    except ConversionError as exc:
        raise as_http_error(exc) from exc

    return ConversionResult(
        category=request.category,
        value=request.value,
        from_unit=request.from_unit,
        to_unit=request.to_unit,
        result=result,
        display=display,
        time_table=time_mode,
    )
