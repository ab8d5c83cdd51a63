"""Volume conversion between liters and US gallons."""

from .table import ConversionTable, LinearTransform, format_default
from .units import VolumeUnit

GALLONS_PER_LITER = 0.264172

TABLE = ConversionTable(
    VolumeUnit,
    {
        (VolumeUnit.LITERS, VolumeUnit.GALLONS): LinearTransform(multiply=GALLONS_PER_LITER),
        (VolumeUnit.GALLONS, VolumeUnit.LITERS): LinearTransform(divide=GALLONS_PER_LITER),
    },
)


def convert_value(value: float, from_unit: VolumeUnit, to_unit: VolumeUnit) -> float:
    return TABLE.convert_value(value, from_unit, to_unit)


def convert(value: float, from_unit: VolumeUnit, to_unit: VolumeUnit) -> str:
    return format_default(convert_value(value, from_unit, to_unit))
