"""
Workouts router for the workout history.

This router contains endpoints for:
- /workouts/history - Workouts grouped by month
- /workouts - Add a workout produced by the entry form
- /workouts/{workout_id} - Update, delete workout
- /workouts/{workout_id}/edit - Open the entry form for an existing workout

Deletes are optimistic: the view changes first and is rolled back if the
store rejects the write, in which case the endpoint answers 502.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_notifier, get_workouts_view
from api.schemas.view import HistoryResponse, ViewResponse, failure_detail, render_view
from application.use_cases import WorkoutsViewController
from backend.core.grouping import to_month_buckets
from domain.models import Workout
from infrastructure import QueueNotifier

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


@router.get("/history", response_model=HistoryResponse)
def get_history(
    view: WorkoutsViewController = Depends(get_workouts_view),
) -> HistoryResponse:
    """Workout history grouped by month, in first-occurrence order."""
    return HistoryResponse(
        month_buckets=to_month_buckets(view.month_buckets),
        empty_state=view.history_empty_state,
        count=len(view.workouts),
    )


@router.post("", response_model=ViewResponse, status_code=201)
def add_workout(
    workout: Workout,
    view: WorkoutsViewController = Depends(get_workouts_view),
    notifier: QueueNotifier = Depends(get_notifier),
) -> ViewResponse:
    """Append a completed workout and close the dialog."""
    result = view.on_workout_added(workout)
    if not result.success:
        status_code = 502 if result.rolled_back else 409
        raise HTTPException(
            status_code=status_code,
            detail=failure_detail(result.error, notifier),
        )
    return render_view(view, notifier)


@router.put("/{workout_id}", response_model=ViewResponse)
def update_workout(
    workout_id: str,
    workout: Workout,
    view: WorkoutsViewController = Depends(get_workouts_view),
    notifier: QueueNotifier = Depends(get_notifier),
) -> ViewResponse:
    """Replace an existing workout with its edited version."""
    if workout.id != workout_id:
        raise HTTPException(
            status_code=400,
            detail=f"Body id '{workout.id}' does not match path id '{workout_id}'",
        )
    result = view.on_workout_updated(workout)
    if not result.success:
        status_code = 502 if result.rolled_back else 404
        raise HTTPException(
            status_code=status_code,
            detail=failure_detail(result.error, notifier),
        )
    return render_view(view, notifier)


@router.delete("/{workout_id}", response_model=ViewResponse)
def delete_workout(
    workout_id: str,
    view: WorkoutsViewController = Depends(get_workouts_view),
    notifier: QueueNotifier = Depends(get_notifier),
) -> ViewResponse:
    """
    Delete a workout.

    Deleting an id that is not in the history is not an error.
    """
    result = view.delete_workout(workout_id)
    if not result.success:
        raise HTTPException(
            status_code=502,
            detail=failure_detail(result.error, notifier),
        )
    return render_view(view, notifier)


@router.post("/{workout_id}/edit", response_model=ViewResponse)
def edit_workout(
    workout_id: str,
    view: WorkoutsViewController = Depends(get_workouts_view),
    notifier: QueueNotifier = Depends(get_notifier),
) -> ViewResponse:
    """Open the entry form in edit mode for an existing workout."""
    if view.edit_workout(workout_id) is None:
        raise HTTPException(status_code=404, detail=f"Workout '{workout_id}' not found")
    return render_view(view, notifier)
