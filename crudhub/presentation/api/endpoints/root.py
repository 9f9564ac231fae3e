"""Welcome document listing the managed collections."""

from fastapi import APIRouter, Depends

from crudhub.application.entity_registry import ENTITIES
from crudhub.config import get_settings
from crudhub.infrastructure.dependencies import get_current_user

router = APIRouter(tags=["Root"])


@router.get("/")
async def welcome(user: dict | None = Depends(get_current_user)) -> dict:
    settings = get_settings()
    return {
        "message": f"Welcome to the {settings.app_title}",
        "version": settings.app_version,
        "documentation": "/docs",
        "authenticated": bool(user),
        "endpoints": {entity.collection: f"/{entity.path}" for entity in ENTITIES},
    }
