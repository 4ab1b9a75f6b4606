"""
Data models for parsed schedule events.

Frozen dataclasses: an event never changes once the parser has built it.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta


@dataclass(frozen=True)
class Event:
    """One time-boxed activity on the day grid."""

    title: str
    start: datetime
    end: datetime

    def shifted(self, days: int) -> "Event":
        """Return a copy moved by whole calendar days."""
        delta = timedelta(days=days)
        return Event(title=self.title, start=self.start + delta, end=self.end + delta)


@dataclass(frozen=True)
class ParseError:
    """A clause that did not match the shorthand."""

    raw_clause: str
    reason: str = "Invalid format"


@dataclass(frozen=True)
class ParseResult:
    """Events and errors from one schedule string, each in input order."""

    events: tuple[Event, ...] = ()
    errors: tuple[ParseError, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.events and not self.errors


@dataclass(frozen=True)
class LayoutMetrics:
    """Day grid sizing derived from the busiest hour."""

    peak_overlap: int
    grid_height: int  # px
    font_scale: float  # rem


@dataclass(frozen=True)
class EventStatus:
    """Whether an event is running at a given moment, and how far along."""

    event: Event
    is_current: bool
    progress_percent: float = field(default=0.0)
