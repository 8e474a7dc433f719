"""
MongoDB Connection
==================

Process-wide MongoDB connection manager.

Owns the single AsyncMongoClient and the handle to the companies collection.
The handle stays unset when the startup connection fails; the service keeps
running and repositories report the store as unavailable.
"""
import logging
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from job_tracker.core.config import Settings

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    MongoDB connection manager.

    Constructed once by the DI container and shared by reference with the
    repositories that need the collection handle.
    """

    def __init__(self, settings: Settings):
        self._settings = settings
        self._client: Optional[AsyncMongoClient] = None
        self._collection: Optional[AsyncCollection] = None

    @property
    def collection(self) -> Optional[AsyncCollection]:
        """Companies collection, or None if the connection was not established."""
        return self._collection

    def is_connected(self) -> bool:
        return self._collection is not None

    async def connect(self) -> bool:
        """
        Connect to MongoDB and select the companies collection.

        Connection failures are logged and swallowed so the API keeps serving
        the endpoints that do not need the store.

        Returns:
            True if the connection was verified, False otherwise
        """
        if self._collection is not None:
            return True  # Already connected

        client: AsyncMongoClient = AsyncMongoClient(self._settings.mongo_uri, tz_aware=True)
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            logger.error("MongoDB connection failed: %s", e)
            await client.close()
            return False

        self._client = client
        database = client[self._settings.mongo_database_name]
        self._collection = database[self._settings.companies_collection]
        logger.info(
            "MongoDB connection successful (%s.%s)",
            self._settings.mongo_database_name,
            self._settings.companies_collection,
        )
        return True

    async def close(self) -> None:
        """Close MongoDB connection."""
        if self._client is not None:
            await self._client.close()
            self._client = None
            self._collection = None
