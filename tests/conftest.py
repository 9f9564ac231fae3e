"""Shared fixtures: an in-memory, motor-shaped document store that counts every access."""

from copy import deepcopy
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any

import pytest
import pytest_asyncio
import bson
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from crudhub.application.interfaces import DocumentStore, EntityRepository
from crudhub.infrastructure.database import CODEC_OPTIONS
from crudhub.infrastructure.database.repositories import MongoEntityRepository
from crudhub.infrastructure.dependencies import require_authenticated
from crudhub.main import create_app


def _through_bson(document: dict) -> dict:
    """Encode and decode as the driver would, so stored values come back in driver form."""
    return bson.decode(bson.encode(document), codec_options=CODEC_OPTIONS)


def _matches(document: dict, filter: dict) -> bool:
    for key, expected in filter.items():
        actual = document.get(key)
        if isinstance(expected, dict) and "$ne" in expected:
            if actual == expected["$ne"]:
                return False
        elif actual != expected:
            return False
    return True


class FakeCursor:
    def __init__(self, documents: list[dict]):
        self._documents = documents

    async def to_list(self, length: int | None = None) -> list[dict]:
        return self._documents if length is None else self._documents[:length]


class FakeCollection:
    """Implements the subset of AsyncIOMotorCollection used by the repository."""

    def __init__(self, name: str, store: "FakeDocumentStore"):
        self.name = name
        self._store = store
        self.documents: dict[ObjectId, dict] = {}

    def _touch(self) -> None:
        self._store.calls += 1
        if self._store.failure is not None:
            raise self._store.failure

    def find(self, filter: dict) -> FakeCursor:
        self._touch()
        found = [deepcopy(d) for d in self.documents.values() if _matches(d, filter)]
        return FakeCursor(found)

    async def find_one(self, filter: dict) -> dict | None:
        self._touch()
        for document in self.documents.values():
            if _matches(document, filter):
                return deepcopy(document)
        return None

    async def count_documents(self, filter: dict) -> int:
        self._touch()
        return sum(1 for d in self.documents.values() if _matches(d, filter))

    async def insert_one(self, document: dict) -> SimpleNamespace:
        self._touch()
        document.setdefault("_id", ObjectId())
        self.documents[document["_id"]] = _through_bson(document)
        return SimpleNamespace(inserted_id=document["_id"])

    async def update_one(self, filter: dict, update: dict) -> SimpleNamespace:
        self._touch()
        for document in self.documents.values():
            if _matches(document, filter):
                document.update(_through_bson(update.get("$set", {})))
                for name in update.get("$unset", {}):
                    document.pop(name, None)
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    async def delete_one(self, filter: dict) -> SimpleNamespace:
        self._touch()
        for entity_id, document in list(self.documents.items()):
            if _matches(document, filter):
                del self.documents[entity_id]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


class TickingClock:
    """Returns a strictly increasing UTC time on every call."""

    def __init__(self):
        self._now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self._now += timedelta(seconds=1)
        return self._now


class FakeDocumentStore(DocumentStore):
    """DocumentStore backed by FakeCollections; ``calls`` counts every collection access."""

    def __init__(self):
        self.calls = 0
        self.failure: Exception | None = None
        self.clock = TickingClock()
        self.collections: dict[str, FakeCollection] = {}

    def collection(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name, self)
        return self.collections[name]

    def repository(self, collection: str) -> EntityRepository:
        return MongoEntityRepository(self.collection(collection), clock=self.clock)

    async def health_check(self) -> bool:
        return self.failure is None

    def seed(self, collection: str, **fields: Any) -> ObjectId:
        """Insert a document directly, bypassing the counter."""
        entity_id = fields.pop("_id", None) or ObjectId()
        self.collection(collection).documents[entity_id] = _through_bson({"_id": entity_id, **fields})
        return entity_id


@pytest.fixture
def store() -> FakeDocumentStore:
    return FakeDocumentStore()


@pytest.fixture
def app(store: FakeDocumentStore):
    application = create_app()
    application.state.store = store
    return application


@pytest.fixture
def logged_in(app):
    """Treat every request as coming from an authenticated session."""
    app.dependency_overrides[require_authenticated] = lambda: {"email": "ada@example.com"}
    yield
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


# ── Valid payloads ──────────────────────────────────────────────────


def user_payload(**overrides: Any) -> dict:
    return {"email": "ada@example.com", "displayName": "Ada Lovelace", **overrides}


def recipe_payload(author_id: ObjectId | str, **overrides: Any) -> dict:
    return {
        "title": "Shakshuka",
        "description": "Eggs poached in a spiced tomato sauce.",
        "ingredients": ["6 eggs", "1 can tomatoes", "1 onion"],
        "instructions": ["Soften the onion in oil.", "Add tomatoes and simmer, then crack in the eggs."],
        "prepTime": 10,
        "cookTime": 25,
        "servingSize": 4,
        "difficulty": "Easy",
        "cuisine": "Maghrebi",
        "authorId": str(author_id),
        **overrides,
    }


def meal_plan_payload(user_id: ObjectId | str, recipe_ids: list, **overrides: Any) -> dict:
    return {
        "userId": str(user_id),
        "name": "Week 12",
        "startDate": "2024-03-18T00:00:00Z",
        "endDate": "2024-03-24T00:00:00Z",
        "meals": [
            {"day": "Monday", "mealType": "Dinner", "recipeId": str(recipe_id)}
            for recipe_id in recipe_ids
        ],
        **overrides,
    }


@pytest.fixture
def payloads():
    return SimpleNamespace(
        user=user_payload,
        recipe=recipe_payload,
        meal_plan=meal_plan_payload,
    )
