"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - Reports the service name and version from the app's settings
"""

from fastapi import APIRouter, Request, status

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.version,
    }
