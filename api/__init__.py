"""
API package for the workout log.

This package contains:
- deps.py: FastAPI dependency providers for DI
- schemas/: Request/response models
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_workout_repo,
    get_exercises_repo,
    get_notifier,
    get_workouts_view,
    reset_view_state,
)

__all__ = [
    # Settings
    "get_settings",
    # Stores
    "get_workout_repo",
    "get_exercises_repo",
    # Collaborators
    "get_notifier",
    # View
    "get_workouts_view",
    "reset_view_state",
]
