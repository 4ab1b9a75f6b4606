"""API Pydantic models."""

from .requests import (
    DensityRequest,
    LifeGridRequest,
    RefreshRequest,
    ScheduleRequest,
    ScrollRequest,
)
from .responses import (
    ErrorCodes,
    ErrorResponse,
    HealthResponse,
    LifeGridResponse,
    RefreshResponse,
    ScheduleResponse,
    ScrollResponse,
)

__all__ = [
    "HealthResponse",
    "ErrorResponse",
    "ErrorCodes",
    "ScheduleRequest",
    "ScheduleResponse",
    "DensityRequest",
    "LifeGridRequest",
    "LifeGridResponse",
    "ScrollRequest",
    "ScrollResponse",
    "RefreshRequest",
    "RefreshResponse",
]
