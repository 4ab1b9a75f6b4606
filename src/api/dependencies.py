"""FastAPI dependencies for authentication and shared conversions."""

import secrets
from datetime import datetime

from fastapi import Header, HTTPException, status

from api.models.responses import EventModel
from core import config
from models.events import Event


async def verify_api_key(x_api_key: str = Header(..., alias="X-API-Key")) -> str:
    """
    Verify API key from X-API-Key header.

    Raises:
        HTTPException: 401 if key is missing or invalid
    """
    if not config.PLANNER_API_KEY:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "API key not configured on server",
                "code": "INTERNAL_ERROR",
                "details": [],
            },
        )

    # Use constant-time comparison to prevent timing attacks
    if not secrets.compare_digest(x_api_key, config.PLANNER_API_KEY):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "error": "Invalid or missing API key",
                "code": "UNAUTHORIZED",
                "details": [],
            },
        )

    return x_api_key


def as_local(value: datetime) -> datetime:
    """Naive local wall-clock time; offsets sent by clients are converted."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def resolve_now(value: datetime | None) -> datetime:
    """Client-supplied 'now', or the server clock."""
    if value is None:
        return datetime.now()
    return as_local(value)


def to_event(model: EventModel) -> Event:
    """
    Convert a wire event, enforcing end > start.

    Raises:
        HTTPException: 422 if the event ends at or before its start
    """
    start, end = as_local(model.start), as_local(model.end)
    if end <= start:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error": "Event must end after it starts",
                "code": "VALIDATION_ERROR",
                "details": [f"{model.title!r}: {start.isoformat()} - {end.isoformat()}"],
            },
        )
    return Event(title=model.title, start=start, end=end)


def to_event_model(event: Event) -> EventModel:
    return EventModel(title=event.title, start=event.start, end=event.end)
