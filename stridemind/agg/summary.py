from collections import Counter
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable, Iterator, Sequence

from stridemind.models import BucketSummary, TimeWindow, WorkoutRecord

from .buckets import partition_records


def round_half_up(value: float, places: int) -> float:
    """
    Round to `places` decimals, with ties going away from zero.

    The built-in round() works on the binary value, so 2.675 would become 2.67.
    Rounding the decimal representation keeps summaries stable for a fixed log.
    """
    quantum = Decimal(1).scaleb(-places)
    try:
        return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        # Too many digits for the decimal context; nothing left to round anyway.
        return round(value, places)


def _per_week(value: float, weeks: int) -> float:
    if weeks <= 0:
        return 0.0
    return value / weeks


def summarize_bucket(
    window: TimeWindow, records: Sequence[WorkoutRecord]
) -> BucketSummary:
    """
    Calculate summary statistics for the workouts in a window.

    Workouts with an unknown distance still count as runs and contribute zero
    miles, while workouts with an unknown effort are left out of the effort average.

    Args:
        window: The window the workouts fall in; its nominal `weeks_in_window`
            is the divisor for the weekly averages.
        records: Workouts in the window.
    """
    total_miles = round_half_up(sum(record.miles for record in records), 2)
    efforts = [record.effort for record in records if record.effort is not None]
    minutes = [record.duration for record in records if record.duration is not None]

    avg_effort = None
    if efforts:
        avg_effort = round_half_up(sum(efforts) / len(efforts), 1)

    return BucketSummary(
        window=window,
        total_miles=total_miles,
        run_count=len(records),
        avg_weekly_miles=round_half_up(
            _per_week(total_miles, window.weeks_in_window), 2
        ),
        avg_runs_per_week=round_half_up(
            _per_week(len(records), window.weeks_in_window), 2
        ),
        avg_effort=avg_effort,
        longest_run=round_half_up(
            max((record.miles for record in records), default=0.0), 2
        ),
        total_minutes=round_half_up(sum(minutes), 1),
        workout_counts=dict(Counter(record.type for record in records)),
    )


def summarize_history(
    records: Sequence[WorkoutRecord], windows: Iterable[TimeWindow]
) -> Iterator[BucketSummary]:
    """Summarize each populated window, newest first; empty windows are omitted."""
    for window, matching in partition_records(records, windows):
        yield summarize_bucket(window, matching)
