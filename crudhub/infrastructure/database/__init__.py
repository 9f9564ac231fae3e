from .mongo_store import CODEC_OPTIONS, MongoDocumentStore
from .repositories import MongoEntityRepository

__all__ = [
    "CODEC_OPTIONS",
    "MongoDocumentStore",
    "MongoEntityRepository",
]
