"""Temperature conversion between Celsius and Fahrenheit.

Unlike the other categories the transforms are affine:
``F = C * 1.8 + 32`` and ``C = (F - 32) / 1.8``.
"""

from .table import ConversionTable, LinearTransform, format_default
from .units import TemperatureUnit

FAHRENHEIT_PER_CELSIUS = 1.8
FAHRENHEIT_OFFSET = 32

TABLE = ConversionTable(
    TemperatureUnit,
    {
        (TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT): LinearTransform(
            multiply=FAHRENHEIT_PER_CELSIUS,
            offset_after=FAHRENHEIT_OFFSET,
        ),
        (TemperatureUnit.FAHRENHEIT, TemperatureUnit.CELSIUS): LinearTransform(
            divide=FAHRENHEIT_PER_CELSIUS,
            offset_before=-FAHRENHEIT_OFFSET,
        ),
    },
)


def convert_value(
    value: float, from_unit: TemperatureUnit, to_unit: TemperatureUnit
) -> float:
    return TABLE.convert_value(value, from_unit, to_unit)


def convert(value: float, from_unit: TemperatureUnit, to_unit: TemperatureUnit) -> str:
    return format_default(convert_value(value, from_unit, to_unit))
