"""MongoDB store handle — owns the motor client and hands out collection repositories.

Invariants:
    - connect() pings the server; a failure propagates so startup aborts
    - repository() refuses with StoreUnavailableError until connect() has succeeded
    - Every driver operation carries the configured deadline (``timeoutMS``)
    - Datetimes are read back timezone-aware, in UTC
"""

import logging
from datetime import timezone

from bson.codec_options import CodecOptions
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from crudhub.application.interfaces import DocumentStore, EntityRepository
from crudhub.domain.exceptions import StoreUnavailableError
from crudhub.infrastructure.database.repositories import MongoEntityRepository

logger = logging.getLogger(__name__)

CODEC_OPTIONS = CodecOptions(tz_aware=True, tzinfo=timezone.utc)


class MongoDocumentStore(DocumentStore):
    """Manages the MongoDB connection lifecycle for the process."""

    def __init__(
        self,
        uri: str,
        database_name: str,
        timeout_ms: int = 10_000,
        server_selection_timeout_ms: int = 5_000,
    ):
        self._uri = uri
        self._database_name = database_name
        self._timeout_ms = timeout_ms
        self._server_selection_timeout_ms = server_selection_timeout_ms
        self.client: AsyncIOMotorClient | None = None
        self.database: AsyncIOMotorDatabase | None = None

    @property
    def is_connected(self) -> bool:
        return self.database is not None

    async def connect(self) -> None:
        """Create the client and verify connectivity. Idempotent."""
        if self.is_connected:
            return
        client = AsyncIOMotorClient(
            self._uri,
            timeoutMS=self._timeout_ms,
            serverSelectionTimeoutMS=self._server_selection_timeout_ms,
            tz_aware=CODEC_OPTIONS.tz_aware,
            tzinfo=CODEC_OPTIONS.tzinfo,
        )
        try:
            await client.admin.command("ping")
        except PyMongoError:
            client.close()
            logger.exception("MongoDB connection failed")
            raise
        self.client = client
        self.database = client[self._database_name]
        logger.info("Connected to MongoDB database: %s", self._database_name)

    async def disconnect(self) -> None:
        if self.client is not None:
            self.client.close()
            logger.info("MongoDB connection closed")
        self.client = None
        self.database = None

    def repository(self, collection: str) -> EntityRepository:
        if self.database is None:
            raise StoreUnavailableError("Database not initialized")
        return MongoEntityRepository(self.database[collection])

    async def health_check(self) -> bool:
        if self.client is None:
            return False
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error("MongoDB health check failed: %s", e)
            return False
