"""API routes describing the available categories and their units."""

from fastapi import APIRouter

from backend.models.conversion import CategorySummary
from conversion.selection import default_units, units_for
from conversion.units import UnitCategory

router = APIRouter()


@router.get("/", response_model=list[CategorySummary])
def list_categories() -> list[CategorySummary]:
    """Return every category in display order."""
    return [_summarize(category) for category in UnitCategory]


@router.get("/{category}", response_model=CategorySummary)
def get_category(category: UnitCategory) -> CategorySummary:
    return _summarize(category)


def _summarize(category: UnitCategory) -> CategorySummary:
    default_from, default_to = default_units(category)
    return CategorySummary(
        category=category,
        units=[unit.value for unit in units_for(category)],
        default_from=default_from.value,
        default_to=default_to.value,
    )
