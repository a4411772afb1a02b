"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of the port interfaces
for fast, isolated testing. No seed files or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Failure injection for store writes
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutRepository, create_workout_repo

    # Direct instantiation
    repo = FakeWorkoutRepository()
    repo.seed([make_workout("w1", date(2023, 4, 10))])

    # Factory function with the standard five-workout history
    repo = create_workout_repo(seed_history_data=True)
"""
import datetime
from typing import List, Optional

from domain.models import PerformedExercise, Workout

# Import all fake implementations
from tests.fakes.workout_repository import FakeWorkoutRepository
from tests.fakes.exercises_repository import FakeExercisesRepository
from tests.fakes.notifier import FakeNotifier
from tests.fakes.entry_form import FakeEntryForm


# =============================================================================
# Factory Functions
# =============================================================================


def make_workout(
    workout_id: str,
    on: datetime.date,
    *,
    name: Optional[str] = None,
    xp_gained: int = 50,
    notes: Optional[str] = None,
) -> Workout:
    """
    Build a workout with a single performed exercise.

    Args:
        workout_id: Workout identifier
        on: Workout date
        name: Workout name (defaults to "Workout <id>")
        xp_gained: XP value
        notes: Optional notes

    Returns:
        Valid Workout
    """
    return Workout(
        id=workout_id,
        name=name or f"Workout {workout_id}",
        date=on,
        display_date="",
        exercises=[
            PerformedExercise(
                id=f"{workout_id}-e1", name="Squat", sets=3, reps=5, weight="100kg"
            )
        ],
        notes=notes,
        xp_gained=xp_gained,
    )


def seed_history() -> List[Workout]:
    """
    The standard five-workout history, all in April 2023, most recent first.
    """
    rows = [
        ("1", "Chest Day", datetime.date(2023, 4, 10), 100),
        ("2", "Back Day", datetime.date(2023, 4, 9), 75),
        ("3", "Leg Day", datetime.date(2023, 4, 7), 75),
        ("4", "Upper Body", datetime.date(2023, 4, 6), 75),
        ("5", "Quick Back", datetime.date(2023, 4, 5), 25),
    ]
    return [
        make_workout(wid, on, name=name, xp_gained=xp) for wid, name, on, xp in rows
    ]


def create_workout_repo(
    *,
    workouts: Optional[List[Workout]] = None,
    seed_history_data: bool = False,
) -> FakeWorkoutRepository:
    """
    Create a FakeWorkoutRepository with optional pre-populated workouts.

    Args:
        workouts: Workouts to seed
        seed_history_data: Seed the standard five-workout history instead

    Returns:
        Pre-populated FakeWorkoutRepository
    """
    repo = FakeWorkoutRepository()
    if seed_history_data:
        repo.seed(seed_history())
    elif workouts:
        repo.seed(workouts)
    return repo


def create_exercises_repo(
    *,
    exercises=None,
) -> FakeExercisesRepository:
    """
    Create a FakeExercisesRepository with optional custom exercises.

    Args:
        exercises: Optional list of exercises, or None for default test data

    Returns:
        Pre-populated FakeExercisesRepository
    """
    return FakeExercisesRepository(exercises=exercises)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Fake implementations
    "FakeWorkoutRepository",
    "FakeExercisesRepository",
    "FakeNotifier",
    "FakeEntryForm",
    # Factory functions
    "make_workout",
    "seed_history",
    "create_workout_repo",
    "create_exercises_repo",
]
