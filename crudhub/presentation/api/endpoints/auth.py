"""Session inspection endpoints.

The login flow itself (Google OAuth) lives outside this service; it stores
the authenticated principal under ``session["user"]``.
"""

import logging

from fastapi import APIRouter, Depends, Request

from crudhub.infrastructure.dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.get("/status")
async def auth_status(user: dict | None = Depends(get_current_user)) -> dict:
    """Reports whether the current session carries a principal."""
    if user:
        return {"authenticated": True, "user": user}
    return {"authenticated": False, "message": "Not logged in"}


@router.get("/logout")
async def logout(request: Request) -> dict:
    """Clears the session."""
    user = request.session.pop("user", None)
    request.session.clear()
    if user:
        logger.info("Session closed for %s", user.get("email", "unknown user"))
    return {"message": "Logged out successfully"}
