"""Resolve the reference point that workout history is bucketed against."""

import zoneinfo
from datetime import date, datetime, time, timedelta, timezone


def today_in_timezone(user_timezone: str | None = None) -> date:
    """
    Get today's date in the user's timezone.

    If user_timezone is None, uses the UTC date.
    """
    now = datetime.now(timezone.utc)
    if user_timezone is None:
        return now.date()
    tz = zoneinfo.ZoneInfo(user_timezone)
    return now.astimezone(tz).date()


def _to_utc_naive(moment: datetime) -> datetime:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment


def resolve_reference_day(
    reference: date | datetime | None = None, user_timezone: str | None = None
) -> date:
    """
    The calendar day of the reference point.

    Aware datetimes are converted to UTC, the same way workout dates are. Without a
    reference, today's date (in `user_timezone` if given) is used.
    """
    if reference is None:
        return today_in_timezone(user_timezone)
    if isinstance(reference, datetime):
        return _to_utc_naive(reference).date()
    return reference


def resolve_window_anchor(
    reference: date | datetime | None = None, user_timezone: str | None = None
) -> date:
    """
    The exclusive end day of the recent window.

    Workouts sit at midnight of their day, so a reference partway through a day
    (including the default, "now") already covers that day's workouts and the
    window ends at the following midnight. A plain date, or a datetime at exactly
    midnight, ends the window at that day.
    """
    if reference is None:
        return today_in_timezone(user_timezone) + timedelta(days=1)
    if isinstance(reference, datetime):
        moment = _to_utc_naive(reference)
        if moment.time() != time.min and moment.date() < date.max:
            return moment.date() + timedelta(days=1)
        return moment.date()
    return reference
