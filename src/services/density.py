"""
Temporal density of the day grid.

Counts how many events touch each hour-of-day bucket and turns the
busiest bucket into layout sizes.
"""

from collections import defaultdict
from collections.abc import Iterable

from core.config import (
    BASE_FONT_SCALE,
    BASE_HEIGHT_PER_HOUR,
    EXTRA_HEIGHT_PER_OVERLAP,
    FONT_SCALE_STEP,
    HOURS_PER_DAY,
    MIN_FONT_SCALE,
)
from models.events import Event, LayoutMetrics


def hourly_counts(events: Iterable[Event]) -> dict[int, int]:
    """
    Count events per hour-of-day (0-23), inclusive of both end hours.

    Only the clock hour is used: an event running from 23:00 to 01:00 the
    next day has an end hour below its start hour and touches no bucket.
    """
    counts: dict[int, int] = defaultdict(int)
    for event in events:
        for hour in range(event.start.hour, event.end.hour + 1):
            counts[hour] += 1
    return dict(counts)


def peak_overlap(events: Iterable[Event]) -> int:
    """Largest number of events sharing one hour bucket, 0 if none."""
    return max(hourly_counts(events).values(), default=0)


def layout_metrics(events: Iterable[Event]) -> LayoutMetrics:
    """Grid height and event font size for the busiest hour."""
    peak = peak_overlap(events)
    return LayoutMetrics(
        peak_overlap=peak,
        grid_height=HOURS_PER_DAY * BASE_HEIGHT_PER_HOUR + peak * EXTRA_HEIGHT_PER_OVERLAP,
        font_scale=round(max(MIN_FONT_SCALE, BASE_FONT_SCALE - peak * FONT_SCALE_STEP), 2),
    )
