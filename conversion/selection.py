"""Pick the converter for a category and resolve unit tags coming from a form or a request."""

from __future__ import annotations

from enum import Enum
from types import ModuleType

from . import UnknownCategoryError, UnsupportedUnitError, logger
from . import duration, length, temperature, volume, weight
from .config import TimeTableMode
from .units import DEFAULT_UNITS, UNITS_BY_CATEGORY, UnitCategory

CONVERTERS: dict[UnitCategory, ModuleType] = {
    UnitCategory.LENGTH: length,
    UnitCategory.WEIGHT: weight,
    UnitCategory.VOLUME: volume,
    UnitCategory.TEMPERATURE: temperature,
    UnitCategory.TIME: duration,
}


def parse_category(tag: UnitCategory | str) -> UnitCategory:
    if isinstance(tag, UnitCategory):
        return tag
    try:
        return UnitCategory(str(tag).strip().lower())
    except ValueError:
        raise UnknownCategoryError(f"Unsupported category: {tag}") from None


def parse_unit(category: UnitCategory | str, tag: Enum | str) -> Enum:
    """Resolve ``tag`` to a member of the category's unit enumeration.

    Units from another category are rejected even when passed as enum members.
    """
    category = parse_category(category)
    unit_enum = UNITS_BY_CATEGORY[category]
    if isinstance(tag, unit_enum):
        return tag
    if isinstance(tag, Enum):
        raise UnsupportedUnitError(
            f"Unsupported {category.value} unit: {tag.value}"
        )
    try:
        return unit_enum(str(tag).strip().lower())
    except ValueError:
        raise UnsupportedUnitError(f"Unsupported {category.value} unit: {tag}") from None


def units_for(category: UnitCategory | str) -> list[Enum]:
    return list(UNITS_BY_CATEGORY[parse_category(category)])


def default_units(category: UnitCategory | str) -> tuple[Enum, Enum]:
    return DEFAULT_UNITS[parse_category(category)]


def convert_value(
    category: UnitCategory | str,
    value: float,
    from_unit: Enum | str,
    to_unit: Enum | str,
    *,
    time_mode: TimeTableMode | str | None = None,
) -> float:
    category, source, target = _resolve(category, from_unit, to_unit)
    if category is UnitCategory.TIME:
        return duration.convert_value(value, source, target, time_mode)
    return CONVERTERS[category].convert_value(value, source, target)


def convert(
    category: UnitCategory | str,
    value: float,
    from_unit: Enum | str,
    to_unit: Enum | str,
    *,
    time_mode: TimeTableMode | str | None = None,
) -> str:
    """Convert ``value`` and return the string the form displays."""
    category, source, target = _resolve(category, from_unit, to_unit)
    if category is UnitCategory.TIME:
        rendered = duration.convert(value, source, target, time_mode)
    else:
        rendered = CONVERTERS[category].convert(value, source, target)
    logger.debug(
        "Converted %s %s -> %s %s (%s)",
        value,
        source.value,
        rendered,
        target.value,
        category.value,
    )
    return rendered


def _resolve(
    category: UnitCategory | str,
    from_unit: Enum | str,
    to_unit: Enum | str,
) -> tuple[UnitCategory, Enum, Enum]:
    category = parse_category(category)
    return category, parse_unit(category, from_unit), parse_unit(category, to_unit)
