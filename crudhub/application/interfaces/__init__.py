from .entity_repository import Document, EntityRepository
from .document_store import DocumentStore

__all__ = [
    "Document",
    "EntityRepository",
    "DocumentStore",
]
