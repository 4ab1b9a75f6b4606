"""
Periodic refresh: recompute everything that depends on the current time.

The host calls refresh() on its own timer (about once a second) and
renders the snapshot. Nothing here keeps state between calls.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from models.events import Event, EventStatus, LayoutMetrics
from models.life import (
    InvalidBirthdate,
    LifeGrid,
    LifeProgress,
    LifespanAssumption,
    LifeUnit,
    MissingLifespanSelection,
)
from services.density import layout_metrics
from services.life_grid import build_life_grid, life_progress
from services.schedule import event_status
from services.scroll import lock_to_now_offset


@dataclass(frozen=True)
class PlannerSnapshot:
    """Everything the UI needs to redraw at one instant."""

    now: datetime
    layout: LayoutMetrics
    statuses: tuple[EventStatus, ...]
    life: LifeGrid | InvalidBirthdate | MissingLifespanSelection | None = None
    progress: LifeProgress | None = None
    scroll_offset: float | None = None


def refresh(
    now: datetime,
    events: Iterable[Event] = (),
    birthdate: str | date | None = None,
    lifespan: LifespanAssumption | str | None = None,
    unit: LifeUnit | str = LifeUnit.WEEK,
    viewport_height: float | None = None,
    lock_to_now: bool = False,
) -> PlannerSnapshot:
    """
    Build a snapshot for now.

    The life grid is only built when a birthdate or lifespan was given, and
    the scroll offset only when lock-to-now is on with a known viewport.
    """
    events = tuple(events)
    layout = layout_metrics(events)
    statuses = tuple(event_status(event, now) for event in events)

    life = None
    progress = None
    if birthdate is not None or lifespan is not None:
        life = build_life_grid(birthdate, lifespan, unit, now)
        if isinstance(life, LifeGrid):
            progress = life_progress(life, birthdate, now)

    offset = None
    if lock_to_now and viewport_height is not None:
        offset = lock_to_now_offset(now, events, viewport_height)

    return PlannerSnapshot(
        now=now,
        layout=layout,
        statuses=statuses,
        life=life,
        progress=progress,
        scroll_offset=offset,
    )
