"""
Input validation for life calendar selections.

Each helper normalises a raw UI value and reports a problem by returning
None or an outcome object instead of raising, so callers can render a
prompt in place of the grid.
"""

from datetime import date, datetime

from core.config import LIFESPAN_ALIASES
from models.life import InvalidBirthdate, LifespanAssumption, LifeUnit

UNIT_ALIASES = {
    "week": LifeUnit.WEEK,
    "weeks": LifeUnit.WEEK,
    "day": LifeUnit.DAY,
    "days": LifeUnit.DAY,
}


def parse_birthdate(value: str | date | None) -> date | InvalidBirthdate:
    """Parse an ISO 'YYYY-MM-DD' birthdate (or pass a date through)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not value.strip():
        return InvalidBirthdate(value=value, reason="Birthdate is required")
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        return InvalidBirthdate(value=value, reason="Expected format: YYYY-MM-DD")


def validate_birthdate(value: str | date | None, now: datetime) -> date | InvalidBirthdate:
    """Parse a birthdate and require it to fall strictly before now."""
    parsed = parse_birthdate(value)
    if isinstance(parsed, InvalidBirthdate):
        return parsed
    if datetime.combine(parsed, datetime.min.time()) >= now:
        return InvalidBirthdate(value=value, reason="Birthdate must be in the past")
    return parsed


def parse_lifespan(value: LifespanAssumption | str | None) -> LifespanAssumption | None:
    """Map a lifespan option (or its legacy alias) to the enum; None if unknown."""
    if isinstance(value, LifespanAssumption):
        return value
    if not isinstance(value, str):
        return None
    key = value.strip().lower()
    key = LIFESPAN_ALIASES.get(key, key)
    try:
        return LifespanAssumption(key)
    except ValueError:
        return None


def parse_unit(value: LifeUnit | str) -> LifeUnit:
    """
    Map 'week(s)' / 'day(s)' to LifeUnit.

    Raises:
        ValueError: for any other unit (the UI only offers these two)
    """
    if isinstance(value, LifeUnit):
        return value
    unit = UNIT_ALIASES.get(str(value).strip().lower())
    if unit is None:
        raise ValueError(f"Unknown life unit '{value}', expected 'week' or 'day'")
    return unit
