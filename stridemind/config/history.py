"""Shared constants for bucketing and rendering workout history."""

# The recent window is listed run by run; everything older is bucketed.
RECENT_WINDOW_DAYS = 28
RECENT_WINDOW_WEEKS = 4
RECENT_WINDOW_LABEL = "Last 4 weeks"

# Four-week buckets cover history back to roughly one year before the reference day.
FOUR_WEEK_BUCKET_DAYS = 28
FOUR_WEEK_BUCKET_WEEKS = 4
HISTORY_FINE_HORIZON_DAYS = 365

# Beyond the horizon, history is summarized in 52-week buckets.
YEAR_BUCKET_DAYS = 364
YEAR_BUCKET_WEEKS = 52

# Rendering limits for the prompt context.
MAX_RECENT_LINES = 8
MAX_LISTED_TYPES = 3

DEFAULT_WORKOUT_TYPE = "Run"
DEFAULT_ACTIVITY_TYPE = "running"
