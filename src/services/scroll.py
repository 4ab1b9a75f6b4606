"""
Scroll position that centres "now" in the day grid viewport.
"""

from collections.abc import Iterable
from datetime import datetime

from models.events import Event
from services.density import layout_metrics

SECONDS_PER_DAY = 24 * 60 * 60


def fraction_of_day(now: datetime) -> float:
    """Share of the local day elapsed at now, clamped to [0, 1]."""
    start_of_day = now.replace(hour=0, minute=0, second=0, microsecond=0)
    fraction = (now - start_of_day).total_seconds() / SECONDS_PER_DAY
    return min(max(fraction, 0.0), 1.0)


def scroll_offset(now: datetime, grid_height: float, viewport_height: float) -> float:
    """
    Vertical offset (px) that puts now in the middle of the viewport.

    Not clamped: the result may be negative or past the maximum scroll,
    and the viewport clamps it.
    """
    return fraction_of_day(now) * grid_height - viewport_height / 2


def lock_to_now_offset(now: datetime, events: Iterable[Event], viewport_height: float) -> float:
    """Scroll offset for a grid sized by the current events."""
    return scroll_offset(now, layout_metrics(events).grid_height, viewport_height)
