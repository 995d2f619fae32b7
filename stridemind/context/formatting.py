from stridemind.agg import round_half_up
from stridemind.config.history import MAX_LISTED_TYPES
from stridemind.models import BucketSummary, WorkoutRecord


def format_number(value: float, precision: int = 2) -> str:
    """
    Round half-up to `precision` decimals, format in fixed point, then trim trailing
    zeros and a bare decimal point.

    Examples:
        4.0 -> "4", 4.25 -> "4.25", 4.50 -> "4.5", 0.125 -> "0.13", 0 -> "0"
    """
    text = f"{round_half_up(value, precision):.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def format_recent_run(record: WorkoutRecord) -> str:
    """Format one workout as a line of the recent-window listing."""
    distance = (
        format_number(record.distance, 2)
        if record.distance is not None
        else "distance N/A"
    )
    effort = format_number(record.effort, 1) if record.effort is not None else "N/A"
    return f"{record.date.isoformat()}: {record.type}, {distance} mi, effort {effort}/10"


def format_training_context_run(record: WorkoutRecord) -> str:
    """Format one workout the way the workout-analysis prompt lists recent training."""
    effort = format_number(record.effort, 1) if record.effort is not None else "N/A"
    return (
        f"- {record.date.isoformat()}: {format_number(record.miles, 2)} miles, "
        f"effort {effort}/10"
    )


def format_bucket(summary: BucketSummary) -> str:
    """Format one historical bucket as a single summary line."""
    line = (
        f"{summary.label}: {format_number(summary.total_miles)} mi across "
        f"{summary.run_count} runs, avg {format_number(summary.avg_weekly_miles)} mi/wk, "
        f"{format_number(summary.avg_runs_per_week)} runs/wk"
    )
    if summary.longest_run > 0:
        line += f", longest {format_number(summary.longest_run)} mi"
    if summary.avg_effort is not None:
        line += f", avg effort {format_number(summary.avg_effort, 1)}/10"

    types = ", ".join(
        f"{workout_type} x{count}"
        for workout_type, count in summary.top_workout_types(MAX_LISTED_TYPES)
    )
    return f"{line}. Types: {types}"
