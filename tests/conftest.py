import os

import pytest

# Ensure allowed environment for env_loader
os.environ.setdefault("ENV", "dev")

from ._factories import WorkoutFactory  # noqa: E402


@pytest.fixture(scope="session")
def workout_factory() -> WorkoutFactory:
    return WorkoutFactory()
