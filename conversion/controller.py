"""Form state for the converter screen: selected category, input value and units."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from . import selection
from .config import TimeTableMode
from .table import format_default
from .units import UnitCategory


@dataclass
class ConverterState:
    """Selection held by the form and forwarded to the converters.

    Switching category resets both units to that category's defaults. The
    input value survives a category switch.
    """

    category: UnitCategory = UnitCategory.LENGTH
    value: float = 0.0
    from_unit: Enum | None = None
    to_unit: Enum | None = None
    time_mode: TimeTableMode | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.category = selection.parse_category(self.category)
        default_from, default_to = selection.default_units(self.category)
        self.from_unit = (
            default_from
            if self.from_unit is None
            else selection.parse_unit(self.category, self.from_unit)
        )
        self.to_unit = (
            default_to
            if self.to_unit is None
            else selection.parse_unit(self.category, self.to_unit)
        )
        self.value = float(self.value)

    def select_category(self, category: UnitCategory | str) -> None:
        self.category = selection.parse_category(category)
        self.from_unit, self.to_unit = selection.default_units(self.category)

    def set_value(self, value: float) -> None:
        self.value = float(value)

    def select_from(self, unit: Enum | str) -> None:
        self.from_unit = selection.parse_unit(self.category, unit)

    def select_to(self, unit: Enum | str) -> None:
        self.to_unit = selection.parse_unit(self.category, unit)

    def swap_units(self) -> None:
        self.from_unit, self.to_unit = self.to_unit, self.from_unit

    def from_options(self) -> list[Enum]:
        """Units offered by the "from" picker; the current target is left out."""
        return [unit for unit in selection.units_for(self.category) if unit is not self.to_unit]

    def to_options(self) -> list[Enum]:
        return [unit for unit in selection.units_for(self.category) if unit is not self.from_unit]

    def result(self) -> str:
        return selection.convert(
            self.category,
            self.value,
            self.from_unit,
            self.to_unit,
            time_mode=self.time_mode,
        )

    def summary(self, rendered: str | None = None) -> str:
        """Result line shown under the form, e.g. ``1.0 meters is 3.28084 feet``.

        ``rendered`` is a result already obtained elsewhere (the API); when
        omitted the conversion runs locally.
        """
        if rendered is None:
            rendered = self.result()
        return (
            f"{format_default(self.value)} {self.from_unit.value} is "
            f"{rendered} {self.to_unit.value}"
        )
