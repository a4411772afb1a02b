"""
FastAPI Dependency Providers for the workout log.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings are cached per-process (lru_cache)
- Stores, notifier and the view controller are cached per-process too: the
  view controller owns the workout collection for the lifetime of the app

Usage in routers:
    from api.deps import get_workouts_view
    from application.use_cases import WorkoutsViewController

    @router.get("/view")
    def read_view(view: WorkoutsViewController = Depends(get_workouts_view)):
        return view.snapshot()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workouts_view] = lambda: fake_view
    app.dependency_overrides[get_notifier] = lambda: fake_notifier
"""

import logging
from functools import lru_cache

# Protocol types (interfaces)
from application.ports import ExercisesRepository, WorkoutRepository

# Concrete implementations
from infrastructure import (
    InMemoryExercisesRepository,
    InMemoryWorkoutRepository,
    QueueNotifier,
    load_seed_exercises,
    load_seed_workouts,
)

from application.use_cases import WorkoutsViewController
from backend.settings import Settings, get_settings as _get_settings

logger = logging.getLogger(__name__)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Store Providers
# =============================================================================


@lru_cache
def get_workout_repo() -> WorkoutRepository:
    """
    Get WorkoutRepository implementation.

    Returns an InMemoryWorkoutRepository seeded from the configured YAML file.
    The return type is the Protocol to enable easy faking.

    Returns:
        WorkoutRepository: Store for the workout collection
    """
    settings = _get_settings()
    return InMemoryWorkoutRepository(load_seed_workouts(settings.seed_workouts_path))


@lru_cache
def get_exercises_repo() -> ExercisesRepository:
    """
    Get ExercisesRepository implementation.

    Returns:
        ExercisesRepository: Read-only exercise catalog
    """
    settings = _get_settings()
    return InMemoryExercisesRepository(load_seed_exercises(settings.seed_exercises_path))


# =============================================================================
# Collaborator Providers
# =============================================================================


@lru_cache
def get_notifier() -> QueueNotifier:
    """
    Get the process-wide notifier.

    Notifications queue here until a response drains them.
    """
    return QueueNotifier()


@lru_cache
def get_workouts_view() -> WorkoutsViewController:
    """
    Get the process-wide workouts view controller.

    Mounting happens on first use: the catalog and the workout collection are
    read from their stores once, after which the controller owns the
    collection.

    Returns:
        WorkoutsViewController: View state for the workouts page
    """
    settings = _get_settings()
    return WorkoutsViewController(
        workout_repo=get_workout_repo(),
        exercises_repo=get_exercises_repo(),
        notifier=get_notifier(),
        month_label_format=settings.month_label_format,
    )


def reset_view_state() -> None:
    """
    Drop cached stores, notifier and view controller.

    The next request mounts a fresh view from the seed files.
    """
    get_workouts_view.cache_clear()
    get_notifier.cache_clear()
    get_workout_repo.cache_clear()
    get_exercises_repo.cache_clear()
    logger.info("Workouts view state reset")
