from .formatting import format_number, format_recent_run, format_bucket
from .history import (
    build_history_context,
    render_workout_history,
    render_history_context,
    render_recent_lines,
    render_history_lines,
    recent_training_lines,
)

__all__ = [
    "format_number",
    "format_recent_run",
    "format_bucket",
    "build_history_context",
    "render_workout_history",
    "render_history_context",
    "render_recent_lines",
    "render_history_lines",
    "recent_training_lines",
]
