"""
MongoDB Connection
==================

Process-wide asyncio MongoDB client for database connections.
"""
import logging
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from barberbook.core.config import Settings

logger = logging.getLogger(__name__)


class MongoClientManager:
    """
    MongoDB client manager.

    Owns the single AsyncMongoClient of the process. The client connects
    lazily on first use and is safe to share between concurrent requests.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._client: Optional[AsyncMongoClient] = None
        self._database: Optional[AsyncDatabase] = None

    def _initialize_client(self) -> None:
        """Initialize MongoDB client connection."""
        if self._client is not None:
            return  # Already initialized

        # tz_aware so stored instants come back as UTC-aware datetimes
        self._client = AsyncMongoClient(self._settings.mongo_uri, tz_aware=True)
        self._database = self._client[self._settings.mongo_database_name]
        logger.info(f"MongoDB client created for database '{self._settings.mongo_database_name}'")

    def get_database(self) -> AsyncDatabase:
        """Get MongoDB database instance."""
        if self._database is None:
            self._initialize_client()
        return self._database

    async def close(self) -> None:
        """Close MongoDB connection."""
        if self._client is not None:
            await self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB client closed")
