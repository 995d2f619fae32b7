from .workout import WorkoutRecord
from .history import TimeWindow, BucketSummary, HistoryContext, days_before

__all__ = [
    "WorkoutRecord",
    "TimeWindow",
    "BucketSummary",
    "HistoryContext",
    "days_before",
]
