import math
import re
from datetime import date, datetime, timezone
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field

from stridemind.config.history import DEFAULT_ACTIVITY_TYPE, DEFAULT_WORKOUT_TYPE

# Leading numeric prefix, the way JS clients' parseFloat reads "5.2 mi" as 5.2.
_LEADING_NUMBER = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def parse_workout_date(v: Any) -> date:
    """
    Convert a loosely-typed date value to a UTC calendar day.

    Accepts dates, datetimes (aware ones are converted to UTC, naive ones are assumed
    to already be UTC), ISO-8601 strings, and epoch milliseconds as sent by the web
    client. The time of day is discarded.
    """
    if isinstance(v, datetime):
        if v.tzinfo is not None:
            try:
                v = v.astimezone(timezone.utc)
            except OverflowError as e:
                raise ValueError(f"Date out of range in UTC: {v!r}") from e
        return v.date()
    if isinstance(v, date):
        return v
    if isinstance(v, bool):
        raise ValueError(f"Not a date: {v!r}")
    if isinstance(v, (int, float)):
        if not math.isfinite(v):
            raise ValueError(f"Not a date: {v!r}")
        try:
            return datetime.fromtimestamp(v / 1000, tz=timezone.utc).date()
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"Timestamp out of range: {v!r}") from e
    if isinstance(v, str) and v.strip():
        try:
            return parse_workout_date(datetime.fromisoformat(v.strip()))
        except ValueError:
            pass
    raise ValueError(f"Date not in a recognized format: {v!r}")


def parse_optional_number(v: Any) -> float | None:
    """
    Coerce a numeric-like value to a float, or None when it can't be read.

    Strings contribute their leading numeric prefix. Booleans, blanks, NaN and
    infinities are treated as unknown rather than as errors.
    """
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, (int, float)):
        number = float(v)
    elif isinstance(v, str):
        match = _LEADING_NUMBER.match(v.strip())
        if match is None:
            return None
        number = float(match.group(0))
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_optional_distance(v: Any) -> float | None:
    """Like `parse_optional_number`, but negative distances are unknown too."""
    number = parse_optional_number(v)
    if number is None or number < 0:
        return None
    return number


def default_if_blank(default: str):
    def _validator(v: Any) -> str:
        if isinstance(v, str) and v.strip():
            return v.strip()
        return default

    return _validator


def _string_or_none(v: Any) -> str | None:
    return v if isinstance(v, str) and v else None


def _string_or_empty(v: Any) -> str:
    return v if isinstance(v, str) else ""


class WorkoutRecord(BaseModel):
    """A single logged workout, normalized to a UTC calendar day."""

    model_config = ConfigDict(from_attributes=True)

    date: Annotated[date, BeforeValidator(parse_workout_date)]
    type: Annotated[str, BeforeValidator(default_if_blank(DEFAULT_WORKOUT_TYPE))] = (
        DEFAULT_WORKOUT_TYPE
    )
    distance: Annotated[float | None, BeforeValidator(parse_optional_distance)] = None
    effort: Annotated[float | None, BeforeValidator(parse_optional_number)] = None
    id: Annotated[str | None, BeforeValidator(_string_or_none)] = None
    activity_type: Annotated[
        str, BeforeValidator(default_if_blank(DEFAULT_ACTIVITY_TYPE))
    ] = Field(
        default=DEFAULT_ACTIVITY_TYPE,
        validation_alias=AliasChoices("activity_type", "activityType"),
    )
    duration: Annotated[float | None, BeforeValidator(parse_optional_distance)] = None
    notes: Annotated[str, BeforeValidator(_string_or_empty)] = ""
    completed: Annotated[bool, BeforeValidator(bool)] = False

    @property
    def has_distance(self) -> bool:
        return self.distance is not None

    @property
    def has_effort(self) -> bool:
        return self.effort is not None

    @property
    def miles(self) -> float:
        """Distance with unknown values counted as zero, for totals."""
        return self.distance if self.distance is not None else 0.0
