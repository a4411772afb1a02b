"""
In-memory store implementations.

Usage:
    from infrastructure.memory import (
        InMemoryWorkoutRepository,
        InMemoryExercisesRepository,
        load_seed_workouts,
        load_seed_exercises,
    )

    workout_repo = InMemoryWorkoutRepository(load_seed_workouts(path))
    exercises_repo = InMemoryExercisesRepository(load_seed_exercises(path))
"""

from infrastructure.memory.exercises_repository import InMemoryExercisesRepository
from infrastructure.memory.seed import load_seed_exercises, load_seed_workouts
from infrastructure.memory.workout_repository import InMemoryWorkoutRepository

__all__ = [
    "InMemoryWorkoutRepository",
    "InMemoryExercisesRepository",
    "load_seed_workouts",
    "load_seed_exercises",
]
