from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field

from stridemind.models import BucketSummary, TimeWindow, WorkoutRecord

from .env_loader import EnvironmentName


class HistoryContextRequest(BaseModel):
    """Request model for summarizing a workout log."""

    # Workouts are validated by the history engine, which drops malformed entries
    # instead of rejecting the whole request.
    workouts: list[Any] = Field(default_factory=list)
    reference_date: datetime | date | None = None
    user_timezone: str | None = None


class HistoryContextResponse(BaseModel):
    """Response model for the history context endpoint."""

    reference_date: date
    recent_window: TimeWindow
    recent_runs: list[WorkoutRecord]
    history: list[BucketSummary]
    text: str


class RecentTrainingResponse(BaseModel):
    """Recent workouts as bullets for the workout-analysis prompt."""

    lines: list[str]


class HealthResponse(BaseModel):
    status: str
    message: str


class EnvironmentResponse(BaseModel):
    """Response model for the environment endpoint."""

    environment: EnvironmentName
