"""Length conversion between meters, feet and inches."""

from .table import ConversionTable, LinearTransform, format_default
from .units import LengthUnit

FEET_PER_METER = 3.28084
INCHES_PER_METER = 39.3701
INCHES_PER_FOOT = 12

TABLE = ConversionTable(
    LengthUnit,
    {
        (LengthUnit.METERS, LengthUnit.FEET): LinearTransform(multiply=FEET_PER_METER),
        (LengthUnit.FEET, LengthUnit.METERS): LinearTransform(divide=FEET_PER_METER),
        (LengthUnit.METERS, LengthUnit.INCHES): LinearTransform(multiply=INCHES_PER_METER),
        (LengthUnit.INCHES, LengthUnit.METERS): LinearTransform(divide=INCHES_PER_METER),
        (LengthUnit.FEET, LengthUnit.INCHES): LinearTransform(multiply=INCHES_PER_FOOT),
        (LengthUnit.INCHES, LengthUnit.FEET): LinearTransform(divide=INCHES_PER_FOOT),
    },
)


def convert_value(value: float, from_unit: LengthUnit, to_unit: LengthUnit) -> float:
    return TABLE.convert_value(value, from_unit, to_unit)


def convert(value: float, from_unit: LengthUnit, to_unit: LengthUnit) -> str:
    """Convert ``value`` and render it at full precision."""
    return format_default(convert_value(value, from_unit, to_unit))
