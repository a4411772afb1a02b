"""
Repository and Collaborator Interfaces (Ports) for the workout log.

This package defines abstract interfaces that decouple the view logic from
infrastructure (stores, notification sinks, the entry form). Implementations
are provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the view needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutRepository, Notifier

    class WorkoutsView:
        def __init__(self, workout_repo: WorkoutRepository, notifier: Notifier):
            self.workout_repo = workout_repo
            self.notifier = notifier
"""

# Workout persistence
from application.ports.workout_repository import WorkoutRepository

# Exercise catalog
from application.ports.exercises_repository import ExercisesRepository

# Collaborators
from application.ports.notifier import Notifier
from application.ports.entry_form import FormCompletionCallback, WorkoutEntryForm

__all__ = [
    # Workout
    "WorkoutRepository",
    # Catalog
    "ExercisesRepository",
    # Collaborators
    "Notifier",
    "WorkoutEntryForm",
    "FormCompletionCallback",
]
