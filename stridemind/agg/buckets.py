import logging
from datetime import date
from enum import Enum
from typing import Iterable, Iterator, Sequence

from stridemind.config.history import (
    RECENT_WINDOW_DAYS,
    RECENT_WINDOW_WEEKS,
    RECENT_WINDOW_LABEL,
    FOUR_WEEK_BUCKET_DAYS,
    FOUR_WEEK_BUCKET_WEEKS,
    HISTORY_FINE_HORIZON_DAYS,
    YEAR_BUCKET_DAYS,
    YEAR_BUCKET_WEEKS,
)
from stridemind.models import TimeWindow, WorkoutRecord, days_before

logger = logging.getLogger(__name__)


class _Phase(Enum):
    FOUR_WEEK = "four_week"
    YEAR = "year"
    DONE = "done"


def four_week_label(bucket_num: int) -> str:
    # Bucket 1 is weeks 5-8; the recent window already covers weeks 1-4.
    return f"[{bucket_num * 4 + 1}-{bucket_num * 4 + 4} weeks ago]"


def year_label(year_num: int) -> str:
    return f"[{year_num}-{year_num + 1} year(s) ago]"


def recent_window(anchor: date) -> TimeWindow:
    """The last 28 days before `anchor`, always present even with no workouts."""
    return TimeWindow(
        start=days_before(anchor, RECENT_WINDOW_DAYS),
        end=anchor,
        label=RECENT_WINDOW_LABEL,
        weeks_in_window=RECENT_WINDOW_WEEKS,
    )


def historical_windows(anchor: date, oldest: date | None) -> Iterator[TimeWindow]:
    """
    Walk backward from the recent window, coarsening as history gets older.

    The walk has two phases:
        - FOUR_WEEK: 28-day buckets, until the next one would start more than a year
          before `anchor`.
        - YEAR: 364-day buckets from wherever the first phase stopped.
    Either phase ends as soon as a bucket would end at or before `oldest`, since
    there is nothing left to cover. Windows are yielded newest first and are
    contiguous with each other and with the recent window. A bucket reaching past
    `date.min` is cut short there, so the last one still covers `oldest`.

    Args:
        anchor: Exclusive end of the recent window.
        oldest: Date of the oldest workout, or None if there are none.
    """
    if oldest is None:
        return

    horizon = days_before(anchor, HISTORY_FINE_HORIZON_DAYS)
    previous = recent_window(anchor)
    phase = _Phase.FOUR_WEEK
    bucket_num = 1
    year_num = 1

    while phase is not _Phase.DONE:
        # The next window ends where the previous one starts.
        if previous.start <= oldest:
            phase = _Phase.DONE
            continue

        match phase:
            case _Phase.FOUR_WEEK:
                next_start = days_before(previous.start, FOUR_WEEK_BUCKET_DAYS)
                if next_start < horizon:
                    phase = _Phase.YEAR
                    continue
                window = previous.preceding(
                    FOUR_WEEK_BUCKET_DAYS,
                    label=four_week_label(bucket_num),
                    weeks_in_window=FOUR_WEEK_BUCKET_WEEKS,
                )
                bucket_num += 1
            case _Phase.YEAR:
                window = previous.preceding(
                    YEAR_BUCKET_DAYS,
                    label=year_label(year_num),
                    weeks_in_window=YEAR_BUCKET_WEEKS,
                )
                year_num += 1

        yield window
        previous = window


def plan_buckets(
    records: Sequence[WorkoutRecord], anchor: date
) -> tuple[TimeWindow, Iterator[TimeWindow]]:
    """
    Plan the recent window and the historical windows covering `records`.

    Workouts dated on or after `anchor` can't fall in any window and are ignored.
    The historical windows are produced lazily and can only be consumed once.
    """
    past_dates = [record.date for record in records if record.date < anchor]
    future_count = len(records) - len(past_dates)
    if future_count:
        logger.debug(f"Ignoring {future_count} workouts dated on or after {anchor}")

    oldest = min(past_dates, default=None)
    return recent_window(anchor), historical_windows(anchor, oldest)


def records_in_window(
    records: Iterable[WorkoutRecord], window: TimeWindow
) -> list[WorkoutRecord]:
    return [record for record in records if window.contains(record.date)]


def partition_records(
    records: Sequence[WorkoutRecord], windows: Iterable[TimeWindow]
) -> Iterator[tuple[TimeWindow, list[WorkoutRecord]]]:
    """Pair each window with its workouts, skipping windows with none."""
    for window in windows:
        matching = records_in_window(records, window)
        if not matching:
            logger.debug(f"Omitting empty bucket {window.label}")
            continue
        yield window, matching
