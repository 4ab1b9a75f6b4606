"""Pydantic request models for API endpoints."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from api.models.responses import EventModel


class ScheduleRequest(BaseModel):
    """Shorthand text to parse, e.g. 'Meeting 9:00-10:00 am; Lunch 12:00-1:00 pm'."""

    text: str
    reference_date: date | None = None  # defaults to today
    repeat_tomorrow: bool = False  # resolve against the day after reference_date


class DensityRequest(BaseModel):
    events: list[EventModel] = []


class LifeGridRequest(BaseModel):
    birthdate: str | None = None  # YYYY-MM-DD
    lifespan: str | None = None  # unhealthy | healthy | extreme
    unit: str = "week"  # week | day
    now: datetime | None = None  # defaults to the server clock


class ScrollRequest(BaseModel):
    """Either grid_height or events (to size the grid) may be given."""

    viewport_height: float = Field(ge=0)
    grid_height: float | None = Field(default=None, ge=0)
    events: list[EventModel] = []
    now: datetime | None = None


class RefreshRequest(BaseModel):
    now: datetime | None = None
    events: list[EventModel] = []
    birthdate: str | None = None
    lifespan: str | None = None
    unit: str = "week"
    viewport_height: float | None = Field(default=None, ge=0)
    lock_to_now: bool = False
