"""Abstract repository interface (port) for document persistence, one collection at a time."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from bson import ObjectId

Document = dict[str, Any]


class EntityRepository(ABC):
    """Port for generic CRUD over one named collection — implemented in the infrastructure layer.

    The repository owns the ``createdAt`` / ``updatedAt`` stamps; callers
    never supply them.
    """

    collection_name: str

    @abstractmethod
    async def list_all(self) -> list[Document]:
        """Return every document in store order."""
        ...

    @abstractmethod
    async def get_by_id(self, entity_id: ObjectId) -> Document | None:
        """Retrieve a single document by its id."""
        ...

    @abstractmethod
    async def find_one(self, filter: Document) -> Document | None:
        """Retrieve the first document matching an exact-match filter."""
        ...

    @abstractmethod
    async def exists(self, entity_id: ObjectId) -> bool:
        """True when a document with this id exists."""
        ...

    @abstractmethod
    async def count(self, filter: Document) -> int:
        """Count documents matching an exact-match filter."""
        ...

    @abstractmethod
    async def create(self, document: Document) -> ObjectId:
        """Insert a new document, stamping both timestamps. Returns the assigned id."""
        ...

    @abstractmethod
    async def replace(
        self,
        entity_id: ObjectId,
        document: Document,
        clear_fields: Iterable[str] = (),
    ) -> bool:
        """Replace the document's fields, removing ``clear_fields``. False if not found."""
        ...

    @abstractmethod
    async def delete(self, entity_id: ObjectId) -> bool:
        """Delete a document. Returns True if deleted, False if not found."""
        ...
