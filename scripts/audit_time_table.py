#!/usr/bin/env python3
"""Print the time conversion table and the legacy entries that disagree with the anchors.

The legacy table is what the converter returns by default. Use this script
to see which factors differ from the seconds-based anchors before switching
``UNIT_CONVERTER_TIME_TABLE`` to ``consistent``.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from conversion import duration, logger
from conversion.config import TimeTableMode


def build_matrix(mode: TimeTableMode) -> list[list[float]]:
    """Row per source unit, column per target unit, in ``TimeUnit`` order."""
    table = duration.get_table(mode)
    return [
        [table.transform(source, target).factor for target in table.units]
        for source in table.units
    ]


def format_matrix(mode: TimeTableMode) -> str:
    table = duration.get_table(mode)
    names = [unit.value for unit in table.units]
    width = max(len(name) for name in names) + 2
    lines = ["".ljust(width) + "".join(name.rjust(16) for name in names)]
    for name, row in zip(names, build_matrix(mode)):
        lines.append(name.ljust(width) + "".join(f"{factor:16.6g}" for factor in row))
    return "\n".join(lines)


def format_deviations(deviations: list[duration.TableDeviation]) -> str:
    if not deviations:
        return "No inconsistencies found."
    lines = [f"{len(deviations)} legacy entries differ from the anchors:"]
    for deviation in deviations:
        lines.append(
            f"  {deviation.from_unit.value:>8} -> {deviation.to_unit.value:<8}"
            f" legacy={deviation.legacy_factor:<14.6g}"
            f" anchored={deviation.anchored_factor:<14.6g}"
            f" error={deviation.relative_error:.2%}"
        )
    return "\n".join(lines)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in TimeTableMode],
        default=TimeTableMode.LEGACY.value,
        help="Which table to print (default: legacy)",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=1e-9,
        help="Relative tolerance used to flag inconsistent entries",
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    mode = TimeTableMode(args.mode)
    deviations = duration.find_inconsistencies(args.tolerance)
    logger.info("Found %s inconsistent legacy time entries", len(deviations))

    if args.json:
        payload = {
            "mode": mode.value,
            "units": [unit.value for unit in duration.get_table(mode).units],
            "matrix": build_matrix(mode),
            "inconsistencies": [
                {
                    "from_unit": deviation.from_unit.value,
                    "to_unit": deviation.to_unit.value,
                    "legacy_factor": deviation.legacy_factor,
                    "anchored_factor": deviation.anchored_factor,
                    "relative_error": deviation.relative_error,
                }
                for deviation in deviations
            ],
        }
        print(json.dumps(payload, indent=2))
        return 0

    print(f"Time table ({mode.value})")
    print(format_matrix(mode))
    print()
    print(format_deviations(deviations))
    return 0


if __name__ == "__main__":
    sys.exit(main())
