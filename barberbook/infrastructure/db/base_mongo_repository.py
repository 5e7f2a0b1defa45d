"""
Base MongoDB Repository
=======================

Shared plumbing for the MongoDB repositories: collection lookup, id
conversion and translation of driver errors into StoreFailure.
"""
import logging
from typing import Any, Optional

from bson import ObjectId
from pymongo.asynchronous.database import AsyncDatabase

from barberbook.domain.exceptions import StoreFailure

logger = logging.getLogger(__name__)


class BaseMongoRepository:
    """Base class holding the collection a repository works on."""

    def __init__(self, database: AsyncDatabase, collection_name: str):
        """
        Initialize repository with a database handle.

        Args:
            database: Database handle shared by all repositories
            collection_name: Collection this repository reads and writes
        """
        self._collection = database[collection_name]

    @staticmethod
    def _object_id(value: str) -> Optional[ObjectId]:
        """Convert an id string to ObjectId; None when it cannot be one."""
        if not ObjectId.is_valid(value):
            return None
        return ObjectId(value)

    @staticmethod
    def _string_id(doc: dict) -> str:
        return str(doc["_id"])

    def _store_failure(self, operation: str, error: Exception, **context: Any) -> StoreFailure:
        """Log a driver error with its context and build the StoreFailure to raise."""
        details = ", ".join(f"{key}={value}" for key, value in context.items())
        logger.error(
            f"MongoDB {operation} on '{self._collection.name}' failed ({details}): {error}",
            exc_info=error,
        )
        return StoreFailure(operation)
