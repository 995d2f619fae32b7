from .workouts import normalize_workout, normalize_workouts

__all__ = [
    "normalize_workout",
    "normalize_workouts",
]
