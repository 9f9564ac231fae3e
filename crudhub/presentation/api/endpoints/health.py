"""Health check endpoint — liveness plus store reachability."""

from fastapi import APIRouter, Request

from crudhub.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request) -> dict:
    """Returns the application status and whether the store answers a ping."""
    settings = get_settings()
    store = getattr(request.app.state, "store", None)
    database = "connected" if store is not None and await store.health_check() else "unavailable"
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "database": database,
    }
