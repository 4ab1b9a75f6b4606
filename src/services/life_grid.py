"""
Life calendar: a birthdate and a lifespan assumption as a grid of
elapsed/remaining weeks or days.
"""

import math
from datetime import date, datetime

from core.config import DAY_COLUMNS, DAYS_PER_WEEK, WEEK_COLUMNS
from core.validation import parse_lifespan, parse_unit, validate_birthdate
from models.life import (
    InvalidBirthdate,
    LifeCell,
    LifeGrid,
    LifeProgress,
    LifespanAssumption,
    LifeUnit,
    MissingLifespanSelection,
)


def add_years(d: date, years: int) -> date:
    """
    Calendar-year addition; Feb 29 lands on Feb 28 in a non-leap year.

    Raises:
        ValueError: if the resulting year is past date.max
    """
    try:
        return d.replace(year=d.year + years)
    except ValueError:
        if (d.month, d.day) != (2, 29) or d.year + years > date.max.year:
            raise
        return d.replace(year=d.year + years, day=28)


def _midnight(d: date) -> datetime:
    return datetime.combine(d, datetime.min.time())


def units_between(start: datetime, end: datetime, unit: LifeUnit) -> int:
    """Whole units from start to end; partial periods do not count."""
    days = (end - start).days
    if unit is LifeUnit.WEEK:
        return days // DAYS_PER_WEEK
    return days


def grid_shape(unit: LifeUnit, lifespan_years: int, total_units: int) -> tuple[int, int]:
    """(columns, rows) for the grid."""
    if unit is LifeUnit.WEEK:
        return WEEK_COLUMNS, lifespan_years
    return DAY_COLUMNS, math.ceil(total_units / DAY_COLUMNS)


def build_life_grid(
    birthdate: str | date | None,
    lifespan: LifespanAssumption | str | None,
    unit: LifeUnit | str,
    now: datetime,
) -> LifeGrid | InvalidBirthdate | MissingLifespanSelection:
    """
    Build the life grid as of now.

    Returns InvalidBirthdate when the birthdate is unparseable, not before
    now, or so late that the expected death date is past date.max, and
    MissingLifespanSelection when no known lifespan is selected.
    The birthdate is checked first.

    Raises:
        ValueError: if unit is not week or day
    """
    life_unit = parse_unit(unit)

    born = validate_birthdate(birthdate, now)
    if isinstance(born, InvalidBirthdate):
        return born

    assumption = parse_lifespan(lifespan)
    if assumption is None:
        return MissingLifespanSelection(value=lifespan)

    years = assumption.years
    try:
        expected_death = add_years(born, years)
    except ValueError:
        return InvalidBirthdate(value=birthdate, reason="Birthdate too far in the future")

    total_units = units_between(_midnight(born), _midnight(expected_death), life_unit)
    elapsed_units = units_between(_midnight(born), now, life_unit)
    columns, rows = grid_shape(life_unit, years, total_units)

    cells = tuple(
        LifeCell(index=i, row=i // columns, column=i % columns, elapsed=i < elapsed_units)
        for i in range(total_units)
    )

    return LifeGrid(
        unit=life_unit,
        lifespan_years=years,
        total_units=total_units,
        elapsed_units=elapsed_units,
        columns=columns,
        rows=rows,
        cells=cells,
    )


def life_progress(grid: LifeGrid, birthdate: str | date, now: datetime) -> LifeProgress:
    """
    Progress readout for a built grid.

    percent uses whole units; exact_fraction uses the precise time lived,
    so a once-a-second refresh shows it moving.
    """
    born = validate_birthdate(birthdate, now)
    if isinstance(born, InvalidBirthdate):
        raise ValueError(f"Invalid birthdate for progress: {born.reason}")

    percent = grid.elapsed_units / grid.total_units * 100 if grid.total_units else 0.0

    start = _midnight(born)
    lifespan_seconds = (_midnight(add_years(born, grid.lifespan_years)) - start).total_seconds()
    lived_seconds = (now - start).total_seconds()

    return LifeProgress(
        elapsed_units=grid.elapsed_units,
        total_units=grid.total_units,
        percent=percent,
        exact_fraction=lived_seconds / lifespan_seconds,
        lifespan_exceeded=grid.lifespan_exceeded,
    )
