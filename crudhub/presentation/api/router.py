"""Top-level API router — aggregates the service routes and one router per entity."""

from fastapi import APIRouter

from crudhub.application.entity_registry import ENTITIES
from crudhub.presentation.api.endpoints.auth import router as auth_router
from crudhub.presentation.api.endpoints.entities import build_entity_router
from crudhub.presentation.api.endpoints.health import router as health_router
from crudhub.presentation.api.endpoints.root import router as root_router

router = APIRouter()
router.include_router(root_router)
router.include_router(health_router)
router.include_router(auth_router)
for _entity in ENTITIES:
    router.include_router(build_entity_router(_entity))
