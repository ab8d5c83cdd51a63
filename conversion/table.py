"""Lookup tables of pairwise unit transforms and result formatting."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum

from . import IncompleteTableError, UnsupportedUnitError


@dataclass(frozen=True)
class LinearTransform:
    """``((value + offset_before) * multiply / divide) + offset_after``.

    ``multiply`` and ``divide`` are kept apart so that a reverse entry such as
    feet -> meters evaluates ``value / 3.28084`` exactly instead of multiplying
    by a rounded reciprocal.
    """

    multiply: float = 1.0
    divide: float = 1.0
    offset_before: float = 0.0
    offset_after: float = 0.0

    def apply(self, value: float) -> float:
        result = float(value)
        # Zero offsets are skipped so identity keeps -0.0 intact.
        if self.offset_before:
            result = result + self.offset_before
        result = result * self.multiply / self.divide
        if self.offset_after:
            result = result + self.offset_after
        return result

    @property
    def factor(self) -> float:
        """Effective multiplier, ignoring offsets."""
        return self.multiply / self.divide


IDENTITY = LinearTransform()


class ConversionTable:
    """Total mapping of ``(from_unit, to_unit)`` pairs to transforms for one category."""

    def __init__(
        self,
        unit_enum: type[Enum],
        entries: Mapping[tuple[Enum, Enum], LinearTransform],
    ) -> None:
        self.unit_enum = unit_enum
        self._entries: dict[tuple[Enum, Enum], LinearTransform] = {
            (unit, unit): IDENTITY for unit in unit_enum
        }
        self._entries.update(entries)

        missing = [
            (source.value, target.value)
            for source in unit_enum
            for target in unit_enum
            if (source, target) not in self._entries
        ]
        if missing:
            raise IncompleteTableError(
                f"{unit_enum.__name__} table is missing pairs: {missing}"
            )

    @property
    def units(self) -> list[Enum]:
        return list(self.unit_enum)

    def pairs(self) -> Iterator[tuple[Enum, Enum, LinearTransform]]:
        for source in self.unit_enum:
            for target in self.unit_enum:
                yield source, target, self._entries[(source, target)]

    def transform(self, from_unit: Enum, to_unit: Enum) -> LinearTransform:
        self._check_unit(from_unit)
        self._check_unit(to_unit)
        return self._entries[(from_unit, to_unit)]

    def convert_value(self, value: float, from_unit: Enum, to_unit: Enum) -> float:
        return self.transform(from_unit, to_unit).apply(value)

    def _check_unit(self, unit: Enum) -> None:
        if not isinstance(unit, self.unit_enum):
            raise UnsupportedUnitError(
                f"{unit!r} is not a {self.unit_enum.__name__}"
            )


def format_default(value: float) -> str:
    """Shortest decimal string that round-trips the float, e.g. ``32.0``."""
    return repr(float(value))


def format_fixed(value: float, places: int = 2) -> str:
    return f"{float(value):.{places}f}"
