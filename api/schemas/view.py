"""
Response/request models shared by the view, workouts and exercises routers.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from application.use_cases import WorkoutsViewController, WorkoutsViewSnapshot
from domain.models import EmptyState, Exercise, MonthBucket, NotificationKind, ViewTab
from infrastructure import QueueNotifier


class NotificationResponse(BaseModel):
    """A toast to show to the user."""

    kind: NotificationKind
    message: str


class ViewResponse(WorkoutsViewSnapshot):
    """Rendered page state plus notifications raised since the last response."""

    notifications: List[NotificationResponse] = Field(default_factory=list)


class HistoryResponse(BaseModel):
    """Workout history grouped by month."""

    month_buckets: List[MonthBucket]
    empty_state: Optional[EmptyState] = None
    count: int


class ExerciseListResponse(BaseModel):
    """Filtered exercise catalog."""

    query: str
    exercises: List[Exercise]
    count: int
    empty_state: Optional[EmptyState] = None


class SelectTabRequest(BaseModel):
    tab: ViewTab


class SearchRequest(BaseModel):
    query: str = ""


def render_view(view: WorkoutsViewController, notifier: QueueNotifier) -> ViewResponse:
    """Snapshot the view and drain pending notifications into the response."""
    snapshot = view.snapshot()
    notifications = [
        NotificationResponse(kind=n.kind, message=n.message) for n in notifier.drain()
    ]
    return ViewResponse(**snapshot.model_dump(), notifications=notifications)


def failure_detail(error: Optional[str], notifier: QueueNotifier) -> dict:
    """
    Error body for a rejected or rolled-back write.

    Notifications raised by the failed request are drained into the body so
    they reach the caller with this response, not with the next one.
    """
    return {
        "message": error,
        "notifications": [
            NotificationResponse(kind=n.kind, message=n.message).model_dump(mode="json")
            for n in notifier.drain()
        ],
    }
