"""
Infrastructure Layer for the workout log.

This package contains concrete implementations of the application ports:
- memory/: In-memory stores seeded from YAML
- notifications.py: Queue-backed notifier drained by the HTTP layer
"""

from infrastructure.memory import (
    InMemoryExercisesRepository,
    InMemoryWorkoutRepository,
    load_seed_exercises,
    load_seed_workouts,
)
from infrastructure.notifications import Notification, QueueNotifier

__all__ = [
    "InMemoryWorkoutRepository",
    "InMemoryExercisesRepository",
    "load_seed_workouts",
    "load_seed_exercises",
    "Notification",
    "QueueNotifier",
]
