"""Referential integrity — confirms that declared foreign keys resolve before a write.

Invariants:
    - Every element of a list-valued foreign key is checked; one miss fails the whole write
    - The first missing reference (declaration order, then list order) is reported
    - Lookups are not transactional: a referenced document deleted between the
      check and the write is not detected
"""

import logging
from collections.abc import Iterator
from copy import deepcopy
from typing import Any

from bson import ObjectId

from crudhub.application.interfaces import Document, DocumentStore
from crudhub.domain.entities import ForeignKey
from crudhub.domain.exceptions import MissingReferenceError

logger = logging.getLogger(__name__)


def iter_references(document: Document, path: str) -> Iterator[tuple[str, Any]]:
    """Yield ``(field_name, value)`` for every value found at a foreign-key path.

    ``meals[].recipeId`` yields ``("meals.0.recipeId", ...)``, ``("meals.1.recipeId", ...)``.
    Absent optional fields yield nothing.
    """
    yield from _walk(document, path.split("."), [])


def _walk(node: Any, segments: list[str], trail: list[str]) -> Iterator[tuple[str, Any]]:
    if not segments:
        if node is not None:
            yield ".".join(trail), node
        return
    if not isinstance(node, dict):
        return
    head, rest = segments[0], segments[1:]
    if head.endswith("[]"):
        key = head[:-2]
        for index, item in enumerate(node.get(key) or []):
            yield from _walk(item, rest, [*trail, key, str(index)])
    elif head in node:
        yield from _walk(node[head], rest, [*trail, head])


def bind_references(value: Document, foreign_keys: tuple[ForeignKey, ...]) -> Document:
    """Return a copy of ``value`` with every foreign-key string converted to ObjectId."""
    document = deepcopy(value)
    for fk in foreign_keys:
        _convert(document, fk.path.split("."))
    return document


def _convert(node: Any, segments: list[str]) -> None:
    if not isinstance(node, dict):
        return
    head, rest = segments[0], segments[1:]
    key = head[:-2] if head.endswith("[]") else head
    if key not in node:
        return
    if head.endswith("[]"):
        for item in node[key] or []:
            _convert(item, rest)
    elif rest:
        _convert(node[key], rest)
    elif isinstance(node[key], str):
        node[key] = ObjectId(node[key])


class ReferenceChecker:
    """Issues an existence lookup per foreign key against its target collection."""

    def __init__(self, store: DocumentStore):
        self._store = store

    async def check(self, document: Document, foreign_keys: tuple[ForeignKey, ...]) -> None:
        """Raise MissingReferenceError for the first reference that does not resolve."""
        for fk in foreign_keys:
            repository = self._store.repository(fk.collection)
            for field_name, reference in iter_references(document, fk.path):
                reference_id = reference if isinstance(reference, ObjectId) else ObjectId(reference)
                if not await repository.exists(reference_id):
                    logger.info(
                        "Missing reference %s=%s in collection %s",
                        field_name, reference_id, fk.collection,
                    )
                    raise MissingReferenceError(field_name, fk.collection, str(reference_id))
