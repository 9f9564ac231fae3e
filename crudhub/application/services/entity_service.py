"""Application service (use case) for validated CRUD over any registered entity type."""

import logging
from typing import Any

from bson import ObjectId

from crudhub.application.interfaces import Document, DocumentStore, EntityRepository
from crudhub.application.services.reference_checker import ReferenceChecker, bind_references
from crudhub.application.services.schema_validator import validate
from crudhub.domain.entities import EntitySpec
from crudhub.domain.exceptions import (
    DependentsExistError,
    DuplicateEntityError,
    EntityNotFoundError,
    SchemaValidationError,
)
from crudhub.domain.identifiers import parse_identifier

logger = logging.getLogger(__name__)


class EntityService:
    """Orchestrates identifier parsing, validation, integrity checks and persistence.

    Each write follows the same order: identifier, schema, uniqueness,
    references, repository. A failure at any step stops before the store is
    written.
    """

    def __init__(self, entity: EntitySpec, store: DocumentStore):
        self._entity = entity
        self._store = store
        self._repository: EntityRepository = store.repository(entity.collection)
        self._references = ReferenceChecker(store)

    @property
    def entity(self) -> EntitySpec:
        return self._entity

    async def list_entities(self) -> list[Document]:
        return await self._repository.list_all()

    async def get_entity(self, raw_id: str) -> Document:
        entity_id = parse_identifier(raw_id, self._entity.name)
        document = await self._repository.get_by_id(entity_id)
        if document is None:
            raise EntityNotFoundError(self._entity.title, raw_id)
        return document

    async def create_entity(self, payload: Any) -> ObjectId:
        document = await self._prepare(payload)
        entity_id = await self._repository.create(document)
        logger.info("Created %s %s", self._entity.name, entity_id)
        return entity_id

    async def replace_entity(self, raw_id: str, payload: Any) -> None:
        entity_id = parse_identifier(raw_id, self._entity.name)
        document = await self._prepare(payload, exclude_id=entity_id)
        clear_fields = set(self._entity.schema.model_fields) - set(document)
        if not await self._repository.replace(entity_id, document, clear_fields):
            raise EntityNotFoundError(self._entity.title, raw_id)
        logger.info("Replaced %s %s", self._entity.name, entity_id)

    async def delete_entity(self, raw_id: str) -> None:
        entity_id = parse_identifier(raw_id, self._entity.name)
        for guard in self._entity.delete_guards:
            dependents = await self._store.repository(guard.collection).count(
                {guard.field: entity_id}
            )
            if dependents > 0:
                logger.info(
                    "Refused to delete %s %s: %d dependent %s",
                    self._entity.name, entity_id, dependents, guard.label,
                )
                raise DependentsExistError(
                    self._entity.name, guard.label, dependents, guard.item
                )
        if not await self._repository.delete(entity_id):
            raise EntityNotFoundError(self._entity.title, raw_id)
        logger.info("Deleted %s %s", self._entity.name, entity_id)

    async def _prepare(self, payload: Any, exclude_id: ObjectId | None = None) -> Document:
        """Validate and integrity-check a payload, returning the document to store."""
        result = validate(self._entity.schema, payload)
        if not result.is_valid:
            raise SchemaValidationError(self._entity.name, result.errors)
        value = result.value or {}

        for field_name in self._entity.unique_fields:
            if field_name not in value:
                continue
            query: Document = {field_name: value[field_name]}
            if exclude_id is not None:
                query["_id"] = {"$ne": exclude_id}
            if await self._repository.find_one(query) is not None:
                raise DuplicateEntityError(self._entity.title, field_name, str(value[field_name]))

        document = bind_references(value, self._entity.foreign_keys)
        await self._references.check(document, self._entity.foreign_keys)
        return document
