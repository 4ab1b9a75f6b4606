#!/usr/bin/env python3
"""
Print the life calendar as a dot matrix.

Usage:
    uv run python src/scripts/life_calendar.py --birthdate 1990-05-17 --lifespan healthy
    uv run python src/scripts/life_calendar.py --birthdate 1990-05-17 --lifespan extreme --unit day
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from models.life import InvalidBirthdate, LifeGrid, LifespanAssumption, MissingLifespanSelection
from services.life_grid import build_life_grid, life_progress

ELAPSED_DOT = "●"
REMAINING_DOT = "○"


def render_rows(grid: LifeGrid) -> list[str]:
    """One text line per grid row."""
    lines = []
    for row_start in range(0, grid.total_units, grid.columns):
        row = grid.cells[row_start : row_start + grid.columns]
        lines.append("".join(ELAPSED_DOT if cell.elapsed else REMAINING_DOT for cell in row))
    return lines


def main(birthdate: str, lifespan: str | None, unit: str) -> int:
    """Main entry point. Returns the process exit code."""
    now = datetime.now()
    outcome = build_life_grid(birthdate, lifespan, unit, now)

    if isinstance(outcome, InvalidBirthdate):
        print(f"Please enter a valid birthday in the past: {outcome.reason}")
        return 1
    if isinstance(outcome, MissingLifespanSelection):
        options = ", ".join(f"{o.value} ({o.years} years)" for o in LifespanAssumption)
        print(f"Please select a lifespan option: {options}")
        return 1

    for line in render_rows(outcome):
        print(line)

    progress = life_progress(outcome, birthdate, now)
    unit_name = f"{outcome.unit.value}s"
    print()
    if progress.lifespan_exceeded:
        print(f"Lifespan exceeded: {progress.elapsed_units} of {progress.total_units} {unit_name} lived")
    else:
        print(
            f"{progress.elapsed_units} of {progress.total_units} {unit_name} lived "
            f"({progress.percent:.2f}%, exact {progress.exact_fraction * 100:.6f}%)"
        )
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Print the life calendar grid")
    parser.add_argument("--birthdate", required=True, help="Birthdate (YYYY-MM-DD)")
    parser.add_argument(
        "--lifespan",
        choices=[o.value for o in LifespanAssumption],
        help="Assumed lifespan option",
    )
    parser.add_argument("--unit", choices=["week", "day"], default="week", help="Grid unit")
    args = parser.parse_args()

    sys.exit(main(args.birthdate, args.lifespan, args.unit))
