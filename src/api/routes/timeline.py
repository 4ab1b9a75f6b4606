"""Now-dependent endpoints: scroll offset and the periodic refresh snapshot."""

from fastapi import APIRouter, Depends, Request

from api.dependencies import resolve_now, to_event, to_event_model, verify_api_key
from api.logging import logged_request
from api.models.requests import RefreshRequest, ScrollRequest
from api.models.responses import (
    EventStatusModel,
    RefreshResponse,
    ScrollResponse,
)
from api.routes.life import resolve_unit, to_life_response
from api.routes.schedule import to_layout_model
from services.density import layout_metrics
from services.refresh import refresh
from services.scroll import lock_to_now_offset, scroll_offset

router = APIRouter(prefix="/v1")


@router.post("/scroll-offset", response_model=ScrollResponse)
async def scroll_offset_endpoint(
    request: Request,
    body: ScrollRequest,
    _api_key: str = Depends(verify_api_key),
):
    """
    Scroll offset that centres now in the viewport (lock-to-now).

    The grid height is taken from the request, or sized from `events`.
    The offset is not clamped.
    """
    with logged_request(request) as request_log:
        now = resolve_now(body.now)
        if body.grid_height is not None:
            grid_height = body.grid_height
            offset = scroll_offset(now, grid_height, body.viewport_height)
        else:
            events = [to_event(e) for e in body.events]
            request_log.events_parsed = len(events)
            grid_height = layout_metrics(events).grid_height
            offset = lock_to_now_offset(now, events, body.viewport_height)

        return ScrollResponse(offset=offset, grid_height=grid_height)


@router.post("/refresh", response_model=RefreshResponse)
async def refresh_endpoint(
    request: Request,
    body: RefreshRequest,
    _api_key: str = Depends(verify_api_key),
):
    """Recompute layout, running events, life grid and scroll offset for now."""
    with logged_request(request) as request_log:
        now = resolve_now(body.now)
        events = [to_event(e) for e in body.events]
        request_log.events_parsed = len(events)

        snapshot = refresh(
            now,
            events=events,
            birthdate=body.birthdate,
            lifespan=body.lifespan,
            unit=resolve_unit(body.unit),
            viewport_height=body.viewport_height,
            lock_to_now=body.lock_to_now,
        )

        life = None
        if snapshot.life is not None:
            life = to_life_response(snapshot.life, body.birthdate, now, snapshot.progress)

        return RefreshResponse(
            now=snapshot.now,
            layout=to_layout_model(snapshot.layout),
            statuses=[
                EventStatusModel(
                    event=to_event_model(s.event),
                    is_current=s.is_current,
                    progress_percent=s.progress_percent,
                )
                for s in snapshot.statuses
            ],
            life=life,
            scroll_offset=snapshot.scroll_offset,
        )
