"""API request/response schemas."""

from api.schemas.view import (
    ExerciseListResponse,
    HistoryResponse,
    NotificationResponse,
    SearchRequest,
    SelectTabRequest,
    ViewResponse,
    failure_detail,
    render_view,
)

__all__ = [
    "ExerciseListResponse",
    "HistoryResponse",
    "NotificationResponse",
    "SearchRequest",
    "SelectTabRequest",
    "ViewResponse",
    "failure_detail",
    "render_view",
]
