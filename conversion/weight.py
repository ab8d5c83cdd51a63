"""Weight conversion between kilograms and pounds."""

from .table import ConversionTable, LinearTransform, format_default
from .units import WeightUnit

POUNDS_PER_KILOGRAM = 2.2

TABLE = ConversionTable(
    WeightUnit,
    {
        (WeightUnit.KILOGRAMS, WeightUnit.POUNDS): LinearTransform(multiply=POUNDS_PER_KILOGRAM),
        (WeightUnit.POUNDS, WeightUnit.KILOGRAMS): LinearTransform(divide=POUNDS_PER_KILOGRAM),
    },
)


def convert_value(value: float, from_unit: WeightUnit, to_unit: WeightUnit) -> float:
    return TABLE.convert_value(value, from_unit, to_unit)


def convert(value: float, from_unit: WeightUnit, to_unit: WeightUnit) -> str:
    return format_default(convert_value(value, from_unit, to_unit))
