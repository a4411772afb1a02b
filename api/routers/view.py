"""
View router for page-level UI state.

This router contains endpoints for:
- /view - Render the full page state
- /view/tab - Switch between history and exercise catalog
- /view/search - Update the catalog search query
- /view/dialog/open, /view/dialog/close - "Log Workout" dialog visibility
- /view/form/complete - Completion callback of the workout entry form
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_notifier, get_workouts_view
from api.schemas.view import (
    SearchRequest,
    SelectTabRequest,
    ViewResponse,
    failure_detail,
    render_view,
)
from application.use_cases import WorkoutsViewController
from domain.models import FormOutcome
from infrastructure import QueueNotifier

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/view",
    tags=["View"],
)


@router.get("", response_model=ViewResponse)
def read_view(
    view: WorkoutsViewController = Depends(get_workouts_view),
    notifier: QueueNotifier = Depends(get_notifier),
) -> ViewResponse:
    """Render the page: tab, search, dialog, month buckets and catalog."""
    return render_view(view, notifier)


@router.put("/tab", response_model=ViewResponse)
def select_tab(
    request: SelectTabRequest,
    view: WorkoutsViewController = Depends(get_workouts_view),
    notifier: QueueNotifier = Depends(get_notifier),
) -> ViewResponse:
    """Switch the active tab."""
    view.select_tab(request.tab)
    return render_view(view, notifier)


@router.put("/search", response_model=ViewResponse)
def set_search_query(
    request: SearchRequest,
    view: WorkoutsViewController = Depends(get_workouts_view),
    notifier: QueueNotifier = Depends(get_notifier),
) -> ViewResponse:
    """Update the catalog search text; the catalog is re-filtered immediately."""
    view.set_search_query(request.query)
    return render_view(view, notifier)


@router.post("/dialog/open", response_model=ViewResponse)
def open_add_dialog(
    view: WorkoutsViewController = Depends(get_workouts_view),
    notifier: QueueNotifier = Depends(get_notifier),
) -> ViewResponse:
    """Open the "Log Workout" dialog."""
    view.open_add_dialog()
    return render_view(view, notifier)


@router.post("/dialog/close", response_model=ViewResponse)
def close_add_dialog(
    view: WorkoutsViewController = Depends(get_workouts_view),
    notifier: QueueNotifier = Depends(get_notifier),
) -> ViewResponse:
    """Close the dialog without submitting anything."""
    view.close_add_dialog()
    return render_view(view, notifier)


@router.post("/form/complete", response_model=ViewResponse)
def complete_form(
    outcome: FormOutcome,
    view: WorkoutsViewController = Depends(get_workouts_view),
    notifier: QueueNotifier = Depends(get_notifier),
) -> ViewResponse:
    """
    Receive the entry form's completion value.

    A cancellation closes the dialog. A submission is added (or, when the
    form was opened for editing, applied as an update).
    """
    result = view.complete_form(outcome)
    if result is not None and not result.success:
        status_code = 502 if result.rolled_back else 409
        raise HTTPException(
            status_code=status_code,
            detail=failure_detail(result.error, notifier),
        )
    return render_view(view, notifier)
