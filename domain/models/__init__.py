"""
Domain models for the workout log.

This package contains pure domain models that are independent of
infrastructure concerns (storage, HTTP, notifications).

These models represent the core concepts:
- Workout: One logged session, the aggregate root
- PerformedExercise: Sets/reps/weight of one exercise inside a Workout
- Exercise: A catalog entry (name + muscle group)
- MonthBucket: Derived grouping of workouts sharing a calendar month
- View types: tabs, form context/outcome, notifications, empty states

Usage:
    >>> from datetime import date
    >>> from domain.models import Workout, PerformedExercise

    >>> workout = Workout(
    ...     id="w1",
    ...     name="Leg Day",
    ...     date=date(2023, 4, 7),
    ...     exercises=[
    ...         PerformedExercise(id="e1", name="Squat", sets=4, reps=12, weight="100kg")
    ...     ],
    ...     xp_gained=75,
    ... )

    >>> # Serialize to JSON
    >>> json_str = workout.model_dump_json(indent=2)

    >>> # Deserialize from JSON
    >>> workout = Workout.model_validate_json(json_str)
"""

from domain.models.exercise import Exercise, PerformedExercise
from domain.models.view import (
    EmptyState,
    FormContext,
    FormMode,
    FormOutcome,
    MonthBucket,
    NotificationKind,
    ViewTab,
)
from domain.models.workout import Workout

__all__ = [
    # Main entities
    "Workout",
    "PerformedExercise",
    "Exercise",
    # View types
    "MonthBucket",
    "EmptyState",
    "FormContext",
    "FormOutcome",
    # Enums
    "ViewTab",
    "NotificationKind",
    "FormMode",
]
