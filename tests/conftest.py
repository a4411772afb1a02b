"""
Shared pytest fixtures.

Provides fresh fakes per test and a TestClient whose view dependencies are
overridden with a controller built from those fakes.
"""

import pytest
from fastapi.testclient import TestClient

from api.deps import get_notifier, get_workouts_view
from application.use_cases import WorkoutsViewController
from tests.fakes import (
    FakeEntryForm,
    FakeExercisesRepository,
    FakeNotifier,
    FakeWorkoutRepository,
    create_workout_repo,
)


@pytest.fixture
def workout_repo() -> FakeWorkoutRepository:
    """Fake workout store seeded with the standard five-workout history."""
    return create_workout_repo(seed_history_data=True)


@pytest.fixture
def exercises_repo() -> FakeExercisesRepository:
    """Fake catalog with the standard ten entries."""
    return FakeExercisesRepository()


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def entry_form() -> FakeEntryForm:
    return FakeEntryForm()


@pytest.fixture
def view(
    workout_repo: FakeWorkoutRepository,
    exercises_repo: FakeExercisesRepository,
    notifier: FakeNotifier,
    entry_form: FakeEntryForm,
) -> WorkoutsViewController:
    """View controller mounted over the fakes."""
    return WorkoutsViewController(
        workout_repo=workout_repo,
        exercises_repo=exercises_repo,
        notifier=notifier,
        entry_form=entry_form,
    )


@pytest.fixture
def client(view: WorkoutsViewController, notifier: FakeNotifier):
    """TestClient with the view controller and notifier overridden."""
    from backend.main import app

    app.dependency_overrides[get_workouts_view] = lambda: view
    app.dependency_overrides[get_notifier] = lambda: notifier

    yield TestClient(app)

    app.dependency_overrides.clear()
