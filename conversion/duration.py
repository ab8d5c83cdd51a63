"""Time conversion across seconds, minutes, hours, days, weeks, months and years.

Two tables cover all 49 ordered unit pairs:

``LEGACY_TABLE``
    The factors the converter has always shipped with. Most entries follow
    the anchors in ``SECONDS_PER_UNIT`` but several do not: days <-> months
    assume 30.4375-day months, days/weeks -> years assume 365.25-day years,
    weeks -> months multiplies by 10080, years -> hours by 87600, and so on.
    They are kept as-is so existing results do not change;
    ``find_inconsistencies`` lists every entry that disagrees with the anchors.

``CONSISTENT_TABLE``
    Every factor derived from ``SECONDS_PER_UNIT`` alone.

Non-identity results are rendered with two decimals.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import TimeTableMode, get_time_table_mode
from .table import ConversionTable, LinearTransform, format_default, format_fixed
from .units import TimeUnit

SECONDS_PER_UNIT: dict[TimeUnit, int] = {
    TimeUnit.SECONDS: 1,
    TimeUnit.MINUTES: 60,
    TimeUnit.HOURS: 3600,
    TimeUnit.DAYS: 86400,
    TimeUnit.WEEKS: 604800,
    TimeUnit.MONTHS: 2592000,  # 30 days
    TimeUnit.YEARS: 31556952,  # 365.2425 days
}

DECIMAL_PLACES = 2


def _times(factor: float) -> LinearTransform:
    return LinearTransform(multiply=factor)


def _per(factor: float) -> LinearTransform:
    return LinearTransform(divide=factor)


S, MIN, H, D, W, MO, Y = (
    TimeUnit.SECONDS,
    TimeUnit.MINUTES,
    TimeUnit.HOURS,
    TimeUnit.DAYS,
    TimeUnit.WEEKS,
    TimeUnit.MONTHS,
    TimeUnit.YEARS,
)

LEGACY_TABLE = ConversionTable(
    TimeUnit,
    {
        (S, MIN): _per(60),
        (S, H): _per(3600),
        (S, D): _per(86400),
        (S, W): _per(604800),
        (S, MO): _per(2592000),
        (S, Y): _per(31556952),
        (MIN, S): _times(60),
        (MIN, H): _per(60),
        (MIN, D): _per(1440),
        (MIN, W): _per(10080),
        (MIN, MO): _per(43200),
        (MIN, Y): _per(525600),
        (H, S): _times(3600),
        (H, MIN): _times(60),
        (H, D): _per(24),
        (H, W): _per(168),
        (H, MO): _per(43200),
        (H, Y): _per(86400),
        (D, S): _times(86400),
        (D, MIN): _times(1440),
        (D, H): _times(24),
        (D, W): _per(7),
        (D, MO): _per(30.4375),
        (D, Y): _per(365.25),
        (W, S): _times(604800),
        (W, MIN): _times(10080),
        (W, H): _times(168),
        (W, D): _times(7),
        (W, MO): _times(10080),
        (W, Y): _times(52.1303),
        (MO, S): _times(2592000),
        (MO, MIN): _times(144000),
        (MO, H): _times(43200),
        (MO, D): _times(30.4375),
        (MO, W): _times(4.3429),
        (MO, Y): _per(12),
        (Y, S): _times(31556952),
        (Y, MIN): _times(525600),
        (Y, H): _times(87600),
        (Y, D): _times(365.25),
        (Y, W): _times(52.1303),
        (Y, MO): _times(12),
    },
)

CONSISTENT_TABLE = ConversionTable(
    TimeUnit,
    {
        (source, target): LinearTransform(
            multiply=SECONDS_PER_UNIT[source],
            divide=SECONDS_PER_UNIT[target],
        )
        for source in TimeUnit
        for target in TimeUnit
        if source is not target
    },
)

_TABLES = {
    TimeTableMode.LEGACY: LEGACY_TABLE,
    TimeTableMode.CONSISTENT: CONSISTENT_TABLE,
}


@dataclass(frozen=True)
class TableDeviation:
    """A legacy entry whose factor differs from the anchor-derived one."""

    from_unit: TimeUnit
    to_unit: TimeUnit
    legacy_factor: float
    anchored_factor: float

    @property
    def relative_error(self) -> float:
        return abs(self.legacy_factor - self.anchored_factor) / self.anchored_factor


def get_table(mode: TimeTableMode | str | None = None) -> ConversionTable:
    """Return the table for ``mode``, or for the configured mode when omitted."""
    if mode is None:
        mode = get_time_table_mode()
    return _TABLES[TimeTableMode(mode)]


def convert_value(
    value: float,
    from_unit: TimeUnit,
    to_unit: TimeUnit,
    mode: TimeTableMode | str | None = None,
) -> float:
    return get_table(mode).convert_value(value, from_unit, to_unit)


def convert(
    value: float,
    from_unit: TimeUnit,
    to_unit: TimeUnit,
    mode: TimeTableMode | str | None = None,
) -> str:
    """Convert ``value`` and render it with two decimals.

    Converting a unit to itself returns the input at full precision
    (``"3600.0"``), not rounded.
    """
    result = convert_value(value, from_unit, to_unit, mode)
    if from_unit is to_unit:
        return format_default(result)
    return format_fixed(result, DECIMAL_PLACES)


def find_inconsistencies(tolerance: float = 1e-9) -> list[TableDeviation]:
    """List legacy entries that disagree with the anchors beyond ``tolerance`` (relative)."""
    deviations: list[TableDeviation] = []
    for source, target, transform in LEGACY_TABLE.pairs():
        anchored = CONSISTENT_TABLE.transform(source, target).factor
        deviation = TableDeviation(source, target, transform.factor, anchored)
        if deviation.relative_error > tolerance:
            deviations.append(deviation)
    return deviations
