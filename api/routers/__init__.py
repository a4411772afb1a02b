"""
Router package for the workout log API.

This package contains all API routers organized by concern:
- health: Health check and development reset endpoint
- view: Page-level UI state (tab, search, dialog, form completion)
- workouts: Workout history, add, update, delete
- exercises: Exercise catalog search and selection
"""

from api.routers.health import router as health_router
from api.routers.view import router as view_router
from api.routers.workouts import router as workouts_router
from api.routers.exercises import router as exercises_router

__all__ = [
    "health_router",
    "view_router",
    "workouts_router",
    "exercises_router",
]
