"""
Application Use Cases for the workout log.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return result objects, not API responses

Usage:
    from application.use_cases import WorkoutsViewController

    view = WorkoutsViewController(
        workout_repo=workout_repo,
        exercises_repo=exercises_repo,
        notifier=notifier,
    )
    view.select_tab("exercises")
    view.set_search_query("back")
    result = view.delete_workout("w-123")
"""

from application.use_cases.workouts_view import (
    CATALOG_EMPTY_STATE,
    HISTORY_EMPTY_STATE,
    DeleteWorkoutResult,
    SaveWorkoutResult,
    WorkoutsViewController,
    WorkoutsViewSnapshot,
)

__all__ = [
    # WorkoutsView
    "WorkoutsViewController",
    "WorkoutsViewSnapshot",
    "DeleteWorkoutResult",
    "SaveWorkoutResult",
    "HISTORY_EMPTY_STATE",
    "CATALOG_EMPTY_STATE",
]
