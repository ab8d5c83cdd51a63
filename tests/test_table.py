import pytest

from conversion import IncompleteTableError
from conversion.table import IDENTITY, ConversionTable, LinearTransform, format_default, format_fixed
from conversion.units import WeightUnit


def test_missing_pair_raises():
    with pytest.raises(IncompleteTableError) as excinfo:
        ConversionTable(
            WeightUnit,
            {(WeightUnit.KILOGRAMS, WeightUnit.POUNDS): LinearTransform(multiply=2.2)},
        )
    assert "pounds" in str(excinfo.value)


def test_identity_pairs_are_filled_in():
    table = ConversionTable(
        WeightUnit,
        {
            (WeightUnit.KILOGRAMS, WeightUnit.POUNDS): LinearTransform(multiply=2.2),
            (WeightUnit.POUNDS, WeightUnit.KILOGRAMS): LinearTransform(divide=2.2),
        },
    )
    assert table.transform(WeightUnit.POUNDS, WeightUnit.POUNDS) is IDENTITY
    assert table.units == [WeightUnit.KILOGRAMS, WeightUnit.POUNDS]


def test_linear_transform_applies_offsets_in_order():
    to_fahrenheit = LinearTransform(multiply=1.8, offset_after=32)
    to_celsius = LinearTransform(divide=1.8, offset_before=-32)
    assert to_fahrenheit.apply(37) == 37 * 1.8 + 32
    assert to_celsius.apply(98.6) == (98.6 - 32) / 1.8
    assert to_celsius.factor == pytest.approx(1 / 1.8)


def test_formatting():
    assert format_default(3) == "3.0"
    assert format_default(0.1 + 0.2) == "0.30000000000000004"
    assert format_fixed(1) == "1.00"
    assert format_fixed(365.25) == "365.25"
    assert format_fixed(2 / 3, 3) == "0.667"
