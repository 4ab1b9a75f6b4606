"""Schedule parsing and density endpoints."""

from datetime import date, timedelta

from fastapi import APIRouter, Depends, HTTPException, Request, status

from api.dependencies import to_event, to_event_model, verify_api_key
from api.logging import logged_request
from api.models.requests import DensityRequest, ScheduleRequest
from api.models.responses import (
    ErrorCodes,
    LayoutModel,
    ParseErrorModel,
    ScheduleResponse,
)
from core import config
from models.events import LayoutMetrics
from services.density import layout_metrics
from services.schedule import parse_schedule, split_clauses

router = APIRouter(prefix="/v1")


def to_layout_model(metrics: LayoutMetrics) -> LayoutModel:
    return LayoutModel(
        peak_overlap=metrics.peak_overlap,
        grid_height=metrics.grid_height,
        font_scale=metrics.font_scale,
    )


@router.post("/schedule/parse", response_model=ScheduleResponse)
async def parse_schedule_endpoint(
    request: Request,
    body: ScheduleRequest,
    _api_key: str = Depends(verify_api_key),
):
    """
    Parse shorthand text into events.

    Malformed clauses come back in `errors`; they never fail the request.
    """
    with logged_request(request) as request_log:
        request_log.input_length = len(body.text)

        if len(body.text) > config.MAX_INPUT_LENGTH:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail={
                    "error": f"Input exceeds maximum length of {config.MAX_INPUT_LENGTH} characters",
                    "code": ErrorCodes.INPUT_TOO_LARGE,
                    "details": [f"Input length: {len(body.text)}"],
                },
            )

        reference_date = body.reference_date or date.today()
        if body.repeat_tomorrow:
            reference_date += timedelta(days=1)

        result = parse_schedule(body.text, reference_date)

        request_log.clause_count = len(split_clauses(body.text))
        request_log.events_parsed = len(result.events)
        request_log.errors_reported = len(result.errors)
        for error in result.errors:
            request_log.details.append(("parse_error", error.raw_clause))

        return ScheduleResponse(
            events=[to_event_model(e) for e in result.events],
            errors=[ParseErrorModel(raw_clause=e.raw_clause, reason=e.reason) for e in result.errors],
            layout=to_layout_model(layout_metrics(result.events)),
        )


@router.post("/schedule/density", response_model=LayoutModel)
async def density_endpoint(
    request: Request,
    body: DensityRequest,
    _api_key: str = Depends(verify_api_key),
):
    """Peak hourly overlap and the layout sizes derived from it."""
    with logged_request(request) as request_log:
        events = [to_event(e) for e in body.events]
        request_log.events_parsed = len(events)
        return to_layout_model(layout_metrics(events))
