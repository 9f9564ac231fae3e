from .entity_repository import MongoEntityRepository, utc_now

__all__ = [
    "MongoEntityRepository",
    "utc_now",
]
