"""
Health check router.

This router provides health check endpoints for monitoring and load balancers,
as well as a development-only reset endpoint.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_settings, reset_view_state
from backend.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}


@router.post("/debug/reset")
def reset_view(settings: Settings = Depends(get_settings)):
    """
    Reload the view from the seed files.

    Only available outside production.
    """
    if settings.is_production:
        raise HTTPException(
            status_code=403,
            detail="This endpoint is not available in production",
        )
    reset_view_state()
    return {"status": "reset"}
