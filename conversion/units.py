"""Closed enumerations for unit categories and the units inside each category."""

from enum import Enum


class UnitCategory(str, Enum):
    LENGTH = "length"
    WEIGHT = "weight"
    VOLUME = "volume"
    TEMPERATURE = "temperature"
    TIME = "time"


class LengthUnit(str, Enum):
    METERS = "meters"
    FEET = "feet"
    INCHES = "inches"


class WeightUnit(str, Enum):
    KILOGRAMS = "kilograms"
    POUNDS = "pounds"


class VolumeUnit(str, Enum):
    LITERS = "liters"
    GALLONS = "gallons"


class TemperatureUnit(str, Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


class TimeUnit(str, Enum):
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"


UNITS_BY_CATEGORY: dict[UnitCategory, type[Enum]] = {
    UnitCategory.LENGTH: LengthUnit,
    UnitCategory.WEIGHT: WeightUnit,
    UnitCategory.VOLUME: VolumeUnit,
    UnitCategory.TEMPERATURE: TemperatureUnit,
    UnitCategory.TIME: TimeUnit,
}

# Starting (from, to) selection for each category's form.
DEFAULT_UNITS: dict[UnitCategory, tuple[Enum, Enum]] = {
    UnitCategory.LENGTH: (LengthUnit.METERS, LengthUnit.FEET),
    UnitCategory.WEIGHT: (WeightUnit.KILOGRAMS, WeightUnit.POUNDS),
    UnitCategory.VOLUME: (VolumeUnit.GALLONS, VolumeUnit.LITERS),
    UnitCategory.TEMPERATURE: (TemperatureUnit.FAHRENHEIT, TemperatureUnit.CELSIUS),
    UnitCategory.TIME: (TimeUnit.DAYS, TimeUnit.HOURS),
}
