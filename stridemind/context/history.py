"""Build the multi-resolution workout history block for the coach's prompt.

The last four weeks are listed run by run. Older history is folded into four-week
buckets back to about a year, then into yearly buckets, so the block stays small no
matter how long the log is while still showing long-term volume, frequency,
intensity and workout mix.
"""

import logging
from datetime import date, datetime
from typing import Any, Iterable, Sequence

from stridemind.agg import (
    plan_buckets,
    records_in_window,
    summarize_history,
)
from stridemind.config.history import MAX_RECENT_LINES, RECENT_WINDOW_LABEL
from stridemind.load import normalize_workouts
from stridemind.models import BucketSummary, HistoryContext, WorkoutRecord
from stridemind.utils.timezone import resolve_reference_day, resolve_window_anchor

from .formatting import format_bucket, format_recent_run, format_training_context_run

logger = logging.getLogger(__name__)

NO_RECENT_RUNS = "No runs logged in the last 4 weeks."
NOT_ENOUGH_HISTORY = "Not enough older data to summarize."
OLDER_HISTORY_HEADING = "Older history"


def render_recent_lines(records: Sequence[WorkoutRecord]) -> list[str]:
    """Lines for the recent window, newest first, with any overflow counted."""
    if not records:
        return [NO_RECENT_RUNS]
    lines = [format_recent_run(record) for record in records[:MAX_RECENT_LINES]]
    overflow = len(records) - MAX_RECENT_LINES
    if overflow > 0:
        lines.append(f"...and {overflow} more runs within the last 4 weeks.")
    return lines


def render_history_lines(summaries: Sequence[BucketSummary]) -> list[str]:
    if not summaries:
        return [NOT_ENOUGH_HISTORY]
    return [format_bucket(summary) for summary in summaries]


def render_history_context(
    recent: Sequence[WorkoutRecord], history: Sequence[BucketSummary]
) -> str:
    """Render the two labeled sections as a plain-text block."""
    sections = [
        (RECENT_WINDOW_LABEL, render_recent_lines(recent)),
        (OLDER_HISTORY_HEADING, render_history_lines(history)),
    ]
    lines = []
    for heading, body in sections:
        lines.append(f"{heading}:")
        lines.extend(f"- {line}" for line in body)
    return "\n".join(lines)


def build_history_context(
    workouts: Iterable[Any],
    reference_date: date | datetime | None = None,
    user_timezone: str | None = None,
) -> HistoryContext:
    """
    Summarize a workout log relative to a reference date.

    Args:
        workouts: Loosely-typed workouts (mappings or objects) exposing `date`,
            `distance`, `effort` and `type`. Malformed entries are dropped.
        reference_date: The point history is measured from. A plain date ends the
            recent window before that day; a datetime partway through a day
            includes it. Defaults to now.
        user_timezone: IANA timezone used to decide what "today" is when no
            reference date is given. If None, uses UTC.
    """
    records = normalize_workouts(workouts)
    reference_day = resolve_reference_day(reference_date, user_timezone)
    anchor = resolve_window_anchor(reference_date, user_timezone)

    recent_window, windows = plan_buckets(records, anchor)
    recent = records_in_window(records, recent_window)
    history = list(summarize_history(records, windows))
    logger.debug(
        f"Built history context for {reference_day}: {len(recent)} recent runs, "
        f"{len(history)} historical buckets"
    )

    return HistoryContext(
        reference_date=reference_day,
        recent_window=recent_window,
        recent_runs=recent,
        history=history,
        text=render_history_context(recent, history),
    )


def render_workout_history(
    workouts: Iterable[Any],
    reference_date: date | datetime | None = None,
    user_timezone: str | None = None,
) -> str:
    """Render a workout log straight to the prompt text block."""
    return build_history_context(workouts, reference_date, user_timezone).text


def recent_training_lines(
    workouts: Iterable[Any],
    reference_date: date | datetime | None = None,
    user_timezone: str | None = None,
) -> list[str]:
    """List the recent window's workouts as compact training-context bullets."""
    context = build_history_context(workouts, reference_date, user_timezone)
    return [format_training_context_run(record) for record in context.recent_runs]
