"""Life calendar endpoint."""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Request, status

from api.dependencies import resolve_now, verify_api_key
from api.logging import logged_request
from api.models.requests import LifeGridRequest
from api.models.responses import (
    ErrorCodes,
    LifeGridModel,
    LifeGridResponse,
    LifeProgressModel,
)
from core.validation import parse_unit
from models.life import (
    InvalidBirthdate,
    LifeGrid,
    LifeProgress,
    LifeUnit,
    MissingLifespanSelection,
)
from services.life_grid import build_life_grid, life_progress

router = APIRouter(prefix="/v1")


def to_life_response(
    outcome: LifeGrid | InvalidBirthdate | MissingLifespanSelection,
    birthdate: str | None,
    now: datetime,
    progress: LifeProgress | None = None,
) -> LifeGridResponse:
    """
    Map a grid outcome onto the response; prompt states are not errors.

    progress is computed from the grid unless the caller already has it.
    """
    if isinstance(outcome, InvalidBirthdate):
        return LifeGridResponse(
            status="invalid_birthdate",
            message=f"Please enter a valid birthday in the past. {outcome.reason}.",
        )
    if isinstance(outcome, MissingLifespanSelection):
        return LifeGridResponse(
            status="missing_lifespan",
            message="Please select a lifespan option.",
        )

    if progress is None:
        progress = life_progress(outcome, birthdate, now)
    return LifeGridResponse(
        status="lifespan_exceeded" if outcome.lifespan_exceeded else "ok",
        grid=LifeGridModel(
            unit=outcome.unit.value,
            lifespan_years=outcome.lifespan_years,
            total_units=outcome.total_units,
            elapsed_units=outcome.elapsed_units,
            columns=outcome.columns,
            rows=outcome.rows,
            elapsed=[cell.elapsed for cell in outcome.cells],
        ),
        progress=LifeProgressModel(
            elapsed_units=progress.elapsed_units,
            total_units=progress.total_units,
            percent=progress.percent,
            exact_fraction=progress.exact_fraction,
            lifespan_exceeded=progress.lifespan_exceeded,
        ),
    )


def resolve_unit(unit: str) -> LifeUnit:
    """
    Parse the requested life unit.

    Raises:
        HTTPException: 400 if unit is not week or day
    """
    try:
        return parse_unit(unit)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Invalid unit",
                "code": ErrorCodes.INVALID_REQUEST,
                "details": [str(e)],
            },
        )


@router.post("/life-grid", response_model=LifeGridResponse)
async def life_grid_endpoint(
    request: Request,
    body: LifeGridRequest,
    _api_key: str = Depends(verify_api_key),
):
    """
    Build the life calendar for a birthdate and lifespan option.

    A missing lifespan or an invalid birthdate returns 200 with a prompt
    status so the client can show a hint instead of an error banner.
    """
    with logged_request(request):
        now = resolve_now(body.now)
        outcome = build_life_grid(body.birthdate, body.lifespan, resolve_unit(body.unit), now)
        return to_life_response(outcome, body.birthdate, now)
