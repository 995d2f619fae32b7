from .workout import WorkoutFactory, REFERENCE_DATE

__all__ = [
    "WorkoutFactory",
    "REFERENCE_DATE",
]
