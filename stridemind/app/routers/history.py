import logging
import zoneinfo

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from stridemind.app.env_loader import get_default_user_timezone
from stridemind.app.models import (
    HistoryContextRequest,
    HistoryContextResponse,
    RecentTrainingResponse,
)
from stridemind.context import build_history_context, recent_training_lines
from stridemind.models import HistoryContext

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/history", tags=["history"])


def _resolve_timezone(user_timezone: str | None) -> str | None:
    """Fall back to the configured timezone and reject unknown ones with a 400."""
    user_timezone = user_timezone or get_default_user_timezone()
    if user_timezone is None:
        return None
    try:
        zoneinfo.ZoneInfo(user_timezone)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        raise HTTPException(
            status_code=400, detail=f"Unknown timezone: {user_timezone}"
        )
    return user_timezone


def _build(request: HistoryContextRequest) -> HistoryContext:
    user_timezone = _resolve_timezone(request.user_timezone)
    return build_history_context(
        request.workouts,
        reference_date=request.reference_date,
        user_timezone=user_timezone,
    )


@router.post("/context", response_model=HistoryContextResponse)
def read_history_context(request: HistoryContextRequest) -> HistoryContextResponse:
    """Summarize a workout log into recent runs plus bucketed older history.

    Malformed workouts are dropped rather than failing the request.
    """
    context = _build(request)
    logger.info(
        f"Summarized {len(context.recent_runs)} recent runs and "
        f"{len(context.history)} historical buckets"
    )
    return HistoryContextResponse(**context.model_dump())


@router.post("/context/text", response_class=PlainTextResponse)
def read_history_context_text(request: HistoryContextRequest) -> str:
    """Render a workout log as the plain-text block used in coach prompts."""
    return _build(request).text


@router.post("/recent", response_model=RecentTrainingResponse)
def read_recent_training(request: HistoryContextRequest) -> RecentTrainingResponse:
    """List the last four weeks of workouts as training-context bullets."""
    user_timezone = _resolve_timezone(request.user_timezone)
    lines = recent_training_lines(
        request.workouts,
        reference_date=request.reference_date,
        user_timezone=user_timezone,
    )
    return RecentTrainingResponse(lines=lines)
