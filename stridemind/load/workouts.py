import logging
from typing import Any, Iterable

from pydantic import ValidationError

from stridemind.models import WorkoutRecord

logger = logging.getLogger(__name__)


def normalize_workout(raw: Any) -> WorkoutRecord | None:
    """Validate a single loosely-typed workout.

    Accepts a mapping or any object exposing the workout fields as attributes.
    Returns None if the record can't be placed on a calendar day.
    """
    try:
        return WorkoutRecord.model_validate(raw, from_attributes=True)
    except ValidationError as e:
        logger.warning(
            f"Dropping workout that failed validation: {e.error_count()} error(s), "
            f"first on {e.errors()[0]['loc']}"
        )
        logger.debug(f"Problematic workout data: {raw!r}")
        return None


def normalize_workouts(raws: Iterable[Any]) -> list[WorkoutRecord]:
    """Normalize raw workouts and sort them newest first.

    Malformed entries are dropped rather than failing the whole batch; the sort is
    stable, so workouts on the same day keep their input order.
    """
    records = []
    total = 0
    for raw in raws:
        total += 1
        record = normalize_workout(raw)
        if record is not None:
            records.append(record)

    records.sort(key=lambda record: record.date, reverse=True)

    dropped = total - len(records)
    if dropped:
        logger.info(f"Normalized {len(records)} workouts (dropped {dropped} invalid)")
    else:
        logger.debug(f"Normalized {len(records)} workouts")
    return records
