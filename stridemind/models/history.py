from datetime import date, timedelta
from typing import Self

from pydantic import BaseModel, ConfigDict

from .workout import WorkoutRecord


def days_before(day: date, days: int) -> date:
    """`day - days`, clamped to the earliest representable date."""
    if (day - date.min).days < days:
        return date.min
    return day - timedelta(days=days)


class TimeWindow(BaseModel):
    """A half-open range of calendar days, `[start, end)`."""

    model_config = ConfigDict(frozen=True)

    start: date
    end: date
    label: str
    weeks_in_window: int  # Nominal width, used as the divisor for weekly averages

    @property
    def days(self) -> int:
        return (self.end - self.start).days

    def contains(self, day: date) -> bool:
        return self.start <= day < self.end

    def preceding(self, days: int, label: str, weeks_in_window: int) -> Self:
        """
        Build the window of `days` days that ends where this one starts.

        Near the start of the calendar the window is cut short at `date.min`.
        """
        return type(self)(
            start=days_before(self.start, days),
            end=self.start,
            label=label,
            weeks_in_window=weeks_in_window,
        )


class BucketSummary(BaseModel):
    """Aggregate statistics for the workouts falling in one window."""

    window: TimeWindow
    total_miles: float
    run_count: int
    avg_weekly_miles: float
    avg_runs_per_week: float
    avg_effort: float | None = None
    longest_run: float
    total_minutes: float = 0.0
    workout_counts: dict[str, int]

    @property
    def label(self) -> str:
        return self.window.label

    def top_workout_types(self, limit: int) -> list[tuple[str, int]]:
        """Most frequent workout types, by count descending then label."""
        ranked = sorted(self.workout_counts.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:limit]


class HistoryContext(BaseModel):
    """The recent-window view, the bucketed history, and the rendered text."""

    reference_date: date
    recent_window: TimeWindow
    recent_runs: list[WorkoutRecord]
    history: list[BucketSummary]
    text: str
