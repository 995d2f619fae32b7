from .buckets import (
    recent_window,
    historical_windows,
    plan_buckets,
    records_in_window,
    partition_records,
)
from .summary import round_half_up, summarize_bucket, summarize_history

__all__ = [
    "recent_window",
    "historical_windows",
    "plan_buckets",
    "records_in_window",
    "partition_records",
    "round_half_up",
    "summarize_bucket",
    "summarize_history",
]
