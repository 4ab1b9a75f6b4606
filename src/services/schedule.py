"""
Schedule parsing: split a ';'-delimited shorthand string into events.
"""

import logging
from collections.abc import Iterable
from datetime import date, datetime

from core.config import CLAUSE_SEPARATOR
from models.events import Event, EventStatus, ParseError, ParseResult
from services.clause import parse_clause

logger = logging.getLogger(__name__)


def split_clauses(text: str) -> list[str]:
    """Split on ';' and drop pieces that are empty after trimming."""
    pieces = (piece.strip() for piece in text.split(CLAUSE_SEPARATOR))
    return [piece for piece in pieces if piece]


def parse_schedule(text: str, reference_date: date) -> ParseResult:
    """
    Parse every clause in text against reference_date.

    Empty or whitespace-only text is a no-op. Malformed clauses are
    collected as errors and do not stop the remaining clauses.
    """
    if not text or not text.strip():
        return ParseResult()

    events: list[Event] = []
    errors: list[ParseError] = []

    for clause in split_clauses(text):
        outcome = parse_clause(clause, reference_date)
        if isinstance(outcome, ParseError):
            logger.warning("Failed to parse event: %s (%s)", clause, outcome.reason)
            errors.append(outcome)
        else:
            events.append(outcome)

    return ParseResult(events=tuple(events), errors=tuple(errors))


def merge_events(existing: Iterable[Event], result: ParseResult) -> tuple[Event, ...]:
    """Append newly parsed events after the existing ones."""
    return tuple(existing) + result.events


def repeat_tomorrow(events: Iterable[Event]) -> tuple[Event, ...]:
    """Duplicate events onto the following day."""
    return tuple(event.shifted(days=1) for event in events)


def event_status(event: Event, now: datetime) -> EventStatus:
    """Report whether event is running at now and its completion percentage."""
    is_current = event.start <= now <= event.end
    if not is_current:
        return EventStatus(event=event, is_current=False)

    elapsed = (now - event.start).total_seconds()
    duration = (event.end - event.start).total_seconds()
    return EventStatus(
        event=event,
        is_current=True,
        progress_percent=elapsed / duration * 100,
    )
