"""
Data models for the life calendar.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from core.config import LIFESPAN_YEARS


class LifespanAssumption(str, Enum):
    """Closed set of lifespan options offered by the UI."""

    UNHEALTHY = "unhealthy"
    HEALTHY = "healthy"
    EXTREME = "extreme"

    @property
    def years(self) -> int:
        return LIFESPAN_YEARS[self.value]


class LifeUnit(str, Enum):
    """Granularity of one life-grid cell."""

    WEEK = "week"
    DAY = "day"


@dataclass(frozen=True)
class LifeCell:
    """One dot in the life grid, laid out row-major."""

    index: int
    row: int
    column: int
    elapsed: bool


@dataclass(frozen=True)
class LifeGrid:
    """
    Elapsed/remaining units of an assumed lifespan.

    elapsed_units can exceed total_units once "now" is past the assumed
    death date; check lifespan_exceeded before rendering.
    """

    unit: LifeUnit
    lifespan_years: int
    total_units: int
    elapsed_units: int
    columns: int
    rows: int
    cells: tuple[LifeCell, ...]

    @property
    def lifespan_exceeded(self) -> bool:
        return self.elapsed_units > self.total_units


@dataclass(frozen=True)
class InvalidBirthdate:
    """Birthdate missing, unparseable, or not in the past."""

    value: str | date | None
    reason: str


@dataclass(frozen=True)
class MissingLifespanSelection:
    """No lifespan option chosen yet; callers show a prompt, not an error."""

    value: object = None


@dataclass(frozen=True)
class LifeProgress:
    """Textual progress readout for a built grid."""

    elapsed_units: int
    total_units: int
    percent: float
    exact_fraction: float
    lifespan_exceeded: bool
