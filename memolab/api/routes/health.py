"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up
    - Never calls the GitHub loader (liveness must not depend on upstreams)
"""

import logging
from fastapi import APIRouter, status

from memolab.api.routes.demo_sessions import active_session_count

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "memolab-api",
        "version": "1.0.0",
        "active_demo_sessions": active_session_count(),
    }
