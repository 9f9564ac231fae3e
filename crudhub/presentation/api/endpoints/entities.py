"""Generic CRUD endpoints — one router per registered entity type."""

from typing import Any

from bson import ObjectId
from fastapi import APIRouter, Body, Depends, status
from fastapi.encoders import jsonable_encoder

from crudhub.application.schemas import CreatedResponse, ErrorResponse, MessageResponse
from crudhub.application.services import EntityService
from crudhub.domain.entities import EntitySpec, Operation
from crudhub.infrastructure.dependencies import (
    entity_service_dependency,
    require_authenticated,
)

_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


def serialize(document: Any) -> Any:
    """Render ids and references as hex strings and datetimes as ISO 8601."""
    return jsonable_encoder(document, custom_encoder={ObjectId: str})


def build_entity_router(entity: EntitySpec) -> APIRouter:
    """Generates list/get/create/replace/delete routes under ``/{entity.path}``."""
    router = APIRouter(prefix=f"/{entity.path}", tags=[entity.tag or entity.title])
    get_service = entity_service_dependency(entity)

    def guard(operation: Operation) -> list:
        return [Depends(require_authenticated)] if entity.requires_auth(operation) else []

    async def list_entities(service: EntityService = Depends(get_service)) -> list[dict]:
        return serialize(await service.list_entities())

    async def get_entity(
        entity_id: str,
        service: EntityService = Depends(get_service),
    ) -> dict:
        return serialize(await service.get_entity(entity_id))

    async def create_entity(
        payload: dict[str, Any] = Body(...),
        service: EntityService = Depends(get_service),
    ) -> CreatedResponse:
        entity_id = await service.create_entity(payload)
        return CreatedResponse(id=str(entity_id))

    async def replace_entity(
        entity_id: str,
        payload: dict[str, Any] = Body(...),
        service: EntityService = Depends(get_service),
    ) -> MessageResponse:
        await service.replace_entity(entity_id, payload)
        return MessageResponse(message=f"{entity.title} updated successfully")

    async def delete_entity(
        entity_id: str,
        service: EntityService = Depends(get_service),
    ) -> MessageResponse:
        await service.delete_entity(entity_id)
        return MessageResponse(message=f"{entity.title} deleted successfully")

    name = entity.collection
    router.add_api_route(
        "",
        list_entities,
        methods=["GET"],
        name=f"list_{name}",
        summary=f"List all {entity.name} documents",
        dependencies=guard(Operation.LIST),
    )
    router.add_api_route(
        "/{entity_id}",
        get_entity,
        methods=["GET"],
        name=f"get_{name}",
        summary=f"Get a {entity.name} by id",
        responses={**_BAD_REQUEST, **_NOT_FOUND},
        dependencies=guard(Operation.GET),
    )
    router.add_api_route(
        "",
        create_entity,
        methods=["POST"],
        name=f"create_{name}",
        summary=f"Create a {entity.name}",
        status_code=status.HTTP_201_CREATED,
        response_model=CreatedResponse,
        responses=_BAD_REQUEST,
        dependencies=guard(Operation.CREATE),
    )
    router.add_api_route(
        "/{entity_id}",
        replace_entity,
        methods=["PUT"],
        name=f"replace_{name}",
        summary=f"Replace a {entity.name}",
        response_model=MessageResponse,
        responses={**_BAD_REQUEST, **_NOT_FOUND},
        dependencies=guard(Operation.REPLACE),
    )
    router.add_api_route(
        "/{entity_id}",
        delete_entity,
        methods=["DELETE"],
        name=f"delete_{name}",
        summary=f"Delete a {entity.name}",
        response_model=MessageResponse,
        responses={**_BAD_REQUEST, **_NOT_FOUND},
        dependencies=guard(Operation.DELETE),
    )
    return router
