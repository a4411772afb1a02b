"""
Domain layer for the workout log.

This package contains pure domain models that are independent of
infrastructure concerns (storage, HTTP, notifications).
"""

from domain.models import (
    EmptyState,
    Exercise,
    FormContext,
    FormMode,
    FormOutcome,
    MonthBucket,
    NotificationKind,
    PerformedExercise,
    ViewTab,
    Workout,
)

__all__ = [
    "EmptyState",
    "Exercise",
    "FormContext",
    "FormMode",
    "FormOutcome",
    "MonthBucket",
    "NotificationKind",
    "PerformedExercise",
    "ViewTab",
    "Workout",
]
