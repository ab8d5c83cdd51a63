import itertools

import pytest

from conversion import UnsupportedUnitError, length, temperature, volume, weight
from conversion.units import LengthUnit, TemperatureUnit, TimeUnit, VolumeUnit, WeightUnit

RATIO_MODULES = [
    (length, LengthUnit),
    (weight, WeightUnit),
    (volume, VolumeUnit),
    (temperature, TemperatureUnit),
]


@pytest.mark.parametrize("module, unit_enum", RATIO_MODULES)
def test_identity_returns_input(module, unit_enum):
    for unit in unit_enum:
        for value in (0.0, -0.0, 1.5, -40.0, 1e12):
            assert module.convert_value(value, unit, unit) == value


def test_identity_keeps_negative_zero():
    assert temperature.convert(-0.0, TemperatureUnit.CELSIUS, TemperatureUnit.CELSIUS) == "-0.0"


@pytest.mark.parametrize("module, unit_enum", RATIO_MODULES)
def test_round_trip_every_pair(module, unit_enum):
    for source, target in itertools.permutations(unit_enum, 2):
        for value in (1.0, 37.5, -12.25, 1000.0):
            there = module.convert_value(value, source, target)
            back = module.convert_value(there, target, source)
            assert back == pytest.approx(value, rel=1e-12)


@pytest.mark.parametrize("module, unit_enum", RATIO_MODULES)
def test_every_pair_is_defined(module, unit_enum):
    pairs = list(module.TABLE.pairs())
    assert len(pairs) == len(unit_enum) ** 2
    for source, target, _ in pairs:
        assert isinstance(module.convert(3.0, source, target), str)


def test_length_scale_and_rendering():
    assert length.convert_value(1, LengthUnit.METERS, LengthUnit.FEET) == pytest.approx(3.28084)
    assert length.convert(1, LengthUnit.METERS, LengthUnit.FEET) == "3.28084"
    assert length.convert(1, LengthUnit.METERS, LengthUnit.INCHES) == "39.3701"
    assert length.convert(1, LengthUnit.FEET, LengthUnit.INCHES) == "12.0"
    assert length.convert(24, LengthUnit.INCHES, LengthUnit.FEET) == "2.0"


def test_length_reverse_uses_division_by_forward_constant():
    value = 7.3
    assert length.convert_value(value, LengthUnit.FEET, LengthUnit.METERS) == value / 3.28084
    assert length.convert_value(value, LengthUnit.INCHES, LengthUnit.METERS) == value / 39.3701


def test_weight_and_volume_scale():
    assert weight.convert_value(1, WeightUnit.KILOGRAMS, WeightUnit.POUNDS) == pytest.approx(2.2)
    assert weight.convert(1, WeightUnit.KILOGRAMS, WeightUnit.POUNDS) == "2.2"
    assert weight.convert_value(11, WeightUnit.POUNDS, WeightUnit.KILOGRAMS) == 11 / 2.2
    assert volume.convert_value(1, VolumeUnit.LITERS, VolumeUnit.GALLONS) == pytest.approx(0.264172)
    assert volume.convert(1, VolumeUnit.LITERS, VolumeUnit.GALLONS) == "0.264172"


def test_temperature_fixed_points():
    assert temperature.convert_value(0, TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT) == 32
    assert temperature.convert_value(100, TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT) == 212
    assert temperature.convert(0, TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT) == "32.0"
    assert temperature.convert_value(
        212, TemperatureUnit.FAHRENHEIT, TemperatureUnit.CELSIUS
    ) == pytest.approx(100)
    assert temperature.convert_value(
        -40, TemperatureUnit.FAHRENHEIT, TemperatureUnit.CELSIUS
    ) == pytest.approx(-40)


def test_unit_from_another_category_is_rejected():
    with pytest.raises(UnsupportedUnitError):
        length.convert(1, LengthUnit.METERS, TimeUnit.HOURS)
    with pytest.raises(UnsupportedUnitError):
        # Plain strings must be resolved by the selection layer first.
        weight.convert(1, "kilograms", WeightUnit.POUNDS)
