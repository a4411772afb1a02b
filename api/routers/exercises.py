"""
Exercises router for the exercise catalog.

This router provides endpoints for:
- Searching the catalog by name or muscle group
- Selecting a catalog entry to log it in a new workout
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_notifier, get_workouts_view
from api.schemas.view import ExerciseListResponse, ViewResponse, render_view
from application.use_cases import CATALOG_EMPTY_STATE, WorkoutsViewController
from backend.core.catalog import filter_exercises
from infrastructure import QueueNotifier

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


@router.get("", response_model=ExerciseListResponse)
def list_exercises(
    q: Optional[str] = Query(
        None,
        description="Search text; defaults to the view's current search query",
    ),
    view: WorkoutsViewController = Depends(get_workouts_view),
) -> ExerciseListResponse:
    """
    Filter the catalog by name or muscle group (case-insensitive).

    Does not change the view's search query; use PUT /view/search for that.
    """
    query = view.search_query if q is None else q
    exercises = filter_exercises(view.catalog, query)
    return ExerciseListResponse(
        query=query,
        exercises=exercises,
        count=len(exercises),
        empty_state=None if exercises else CATALOG_EMPTY_STATE,
    )


@router.post("/{exercise_id}/select", response_model=ViewResponse)
def select_exercise(
    exercise_id: str,
    view: WorkoutsViewController = Depends(get_workouts_view),
    notifier: QueueNotifier = Depends(get_notifier),
) -> ViewResponse:
    """Open the add dialog with this catalog entry pre-selected."""
    view.select_exercise(exercise_id)
    return render_view(view, notifier)
