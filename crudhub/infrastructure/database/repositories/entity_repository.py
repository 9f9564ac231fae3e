"""Concrete repository implementation over a single MongoDB collection (motor)."""

import logging
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from datetime import datetime, timezone

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import ConnectionFailure

from crudhub.application.interfaces import Document, EntityRepository
from crudhub.domain.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@contextmanager
def _store_errors(operation: str, collection: str) -> Iterator[None]:
    """Map driver connectivity failures to StoreUnavailableError; other driver errors propagate."""
    try:
        yield
    except ConnectionFailure as e:
        logger.error("Store unreachable during %s on %s: %s", operation, collection, e)
        raise StoreUnavailableError("Database unavailable") from e


class MongoEntityRepository(EntityRepository):
    """Implements the EntityRepository port on a motor collection.

    ``replace`` is a full-document replace expressed as ``$set`` plus
    ``$unset`` so that ``createdAt`` survives untouched.
    """

    def __init__(
        self,
        collection: AsyncIOMotorCollection,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._collection = collection
        self._clock = clock
        self.collection_name = collection.name

    async def list_all(self) -> list[Document]:
        with _store_errors("find", self.collection_name):
            return await self._collection.find({}).to_list(length=None)

    async def get_by_id(self, entity_id: ObjectId) -> Document | None:
        return await self.find_one({"_id": entity_id})

    async def find_one(self, filter: Document) -> Document | None:
        with _store_errors("find_one", self.collection_name):
            return await self._collection.find_one(filter)

    async def exists(self, entity_id: ObjectId) -> bool:
        return await self.find_one({"_id": entity_id}) is not None

    async def count(self, filter: Document) -> int:
        with _store_errors("count_documents", self.collection_name):
            return await self._collection.count_documents(filter)

    async def create(self, document: Document) -> ObjectId:
        now = self._clock()
        record = {**document, "createdAt": now, "updatedAt": now}
        with _store_errors("insert_one", self.collection_name):
            result = await self._collection.insert_one(record)
        return result.inserted_id

    async def replace(
        self,
        entity_id: ObjectId,
        document: Document,
        clear_fields: Iterable[str] = (),
    ) -> bool:
        update: Document = {"$set": {**document, "updatedAt": self._clock()}}
        unset = {name: "" for name in clear_fields if name not in document}
        if unset:
            update["$unset"] = unset
        with _store_errors("update_one", self.collection_name):
            result = await self._collection.update_one({"_id": entity_id}, update)
        return result.matched_count > 0

    async def delete(self, entity_id: ObjectId) -> bool:
        with _store_errors("delete_one", self.collection_name):
            result = await self._collection.delete_one({"_id": entity_id})
        return result.deleted_count > 0
