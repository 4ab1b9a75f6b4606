"""Pydantic response models for API endpoints."""

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy" or "unhealthy"
    version: str
    database_available: bool
    timestamp: str  # ISO 8601 UTC
    error: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    INVALID_REQUEST = "INVALID_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    INPUT_TOO_LARGE = "INPUT_TOO_LARGE"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class EventModel(BaseModel):
    """A parsed event on the wire."""

    title: str
    start: datetime
    end: datetime


class ParseErrorModel(BaseModel):
    raw_clause: str
    reason: str


class LayoutModel(BaseModel):
    peak_overlap: int
    grid_height: int
    font_scale: float


class ScheduleResponse(BaseModel):
    """Result of parsing a schedule string."""

    events: list[EventModel]
    errors: list[ParseErrorModel]
    layout: LayoutModel


class LifeProgressModel(BaseModel):
    elapsed_units: int
    total_units: int
    percent: float
    exact_fraction: float
    lifespan_exceeded: bool


class LifeGridModel(BaseModel):
    unit: str
    lifespan_years: int
    total_units: int
    elapsed_units: int
    columns: int
    rows: int
    elapsed: list[bool]  # one flag per cell, row-major


class LifeGridResponse(BaseModel):
    """
    Life calendar outcome.

    status is "ok", "lifespan_exceeded", "invalid_birthdate" or
    "missing_lifespan"; the last two carry a message for the prompt.
    """

    status: str
    message: str | None = None
    grid: LifeGridModel | None = None
    progress: LifeProgressModel | None = None


class ScrollResponse(BaseModel):
    offset: float
    grid_height: float


class EventStatusModel(BaseModel):
    event: EventModel
    is_current: bool
    progress_percent: float


class RefreshResponse(BaseModel):
    """Snapshot of everything that depends on the current time."""

    now: datetime
    layout: LayoutModel
    statuses: list[EventStatusModel]
    life: LifeGridResponse | None = None
    scroll_offset: float | None = None
