"""
Shorthand clause parsing: "Title 9:00-10:00 am" -> Event.

A clause is tokenised, then read by a small grammar:

    clause := title? time dash time meridiem
    title  := "["? text "]"?

The single meridiem applies to both times, and an end time earlier than
the start time rolls over to the next day.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from models.events import Event, ParseError

_TOKEN_RE = re.compile(
    r"(?P<time>\d{1,2}:\d{2})(?!\d)"
    r"|(?P<dash>-)"
    r"|(?P<meridiem>(?i:am|pm))(?![A-Za-z])"
    r"|(?P<lbracket>\[)"
    r"|(?P<rbracket>\])"
    r"|(?P<space>\s+)"
    # A digit run touching a clock time leaves the time its last 1-2 digits
    r"|(?P<text>[^\s\[\]\-\d]+|\d+?(?=\d{1,2}:\d{2}(?!\d))|\d+|.)"
)

# Kinds the grammar expects after the title, in order
_TAIL = ("time", "dash", "time", "meridiem")


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    start: int
    end: int


class ClauseSyntaxError(Exception):
    """Raised inside the parser; turned into a ParseError at the boundary."""


def tokenize(clause: str) -> list[Token]:
    """Split a clause into tokens, keeping source offsets."""
    return [
        Token(kind=m.lastgroup, text=m.group(), start=m.start(), end=m.end())
        for m in _TOKEN_RE.finditer(clause)
    ]


def _parse_title(clause: str, tokens: list[Token]) -> str:
    """Title text with one optional wrapping bracket pair removed."""
    if not tokens:
        return ""
    if tokens[0].kind == "lbracket":
        tokens = tokens[1:]
    if tokens and tokens[-1].kind == "rbracket":
        tokens = tokens[:-1]
    if not tokens:
        return ""
    return clause[tokens[0].start : tokens[-1].end].strip()


def _parse_clock(token: Token, meridiem: str) -> tuple[int, int]:
    """12-hour 'H:MM' plus meridiem -> 24-hour (hour, minute)."""
    hour_text, minute_text = token.text.split(":")
    hour, minute = int(hour_text), int(minute_text)
    if not 1 <= hour <= 12:
        raise ClauseSyntaxError(f"Hour out of range in '{token.text}'")
    if not 0 <= minute <= 59:
        raise ClauseSyntaxError(f"Minute out of range in '{token.text}'")
    hour = hour % 12
    if meridiem == "pm":
        hour += 12
    return hour, minute


def _read_clause(clause: str) -> tuple[str, Token, Token, str]:
    """Apply the grammar; return (title, start time, end time, meridiem)."""
    tokens = tokenize(clause)
    significant = [t for t in tokens if t.kind != "space"]
    if len(significant) < len(_TAIL):
        raise ClauseSyntaxError("Expected 'H:MM-H:MM am|pm'")

    tail = significant[-len(_TAIL) :]
    for token, expected in zip(tail, _TAIL):
        if token.kind != expected:
            raise ClauseSyntaxError("Expected 'H:MM-H:MM am|pm'")

    start_token, _, end_token, meridiem_token = tail
    title_tokens = significant[: -len(_TAIL)]
    title = _parse_title(clause, title_tokens)
    return title, start_token, end_token, meridiem_token.text.lower()


def resolve_range(
    start: tuple[int, int], end: tuple[int, int], on: date
) -> tuple[datetime, datetime]:
    """
    Place two clock times on a calendar date.

    An end earlier than the start is moved to the following day, once.
    """
    start_dt = datetime.combine(on, datetime.min.time()).replace(hour=start[0], minute=start[1])
    end_dt = datetime.combine(on, datetime.min.time()).replace(hour=end[0], minute=end[1])
    if end_dt < start_dt:
        end_dt += timedelta(days=1)
    return start_dt, end_dt


def parse_clause(clause: str, reference_date: date) -> Event | ParseError:
    """
    Parse one clause against reference_date.

    Never raises for bad input: any mismatch returns a ParseError carrying
    the clause verbatim.
    """
    if isinstance(reference_date, datetime):
        reference_date = reference_date.date()

    try:
        title, start_token, end_token, meridiem = _read_clause(clause)
        start, end = resolve_range(
            _parse_clock(start_token, meridiem),
            _parse_clock(end_token, meridiem),
            reference_date,
        )
    except ClauseSyntaxError as e:
        return ParseError(raw_clause=clause, reason=str(e))

    if end == start:
        return ParseError(raw_clause=clause, reason="Start and end times are equal")

    return Event(title=title, start=start, end=end)
