from typing import TYPE_CHECKING

from ...infrastructure.db.mongo_connection import MongoClientManager

if TYPE_CHECKING:
    from ..container import DIContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    CLIENT_KEY = "mongo_client"
    DATABASE_KEY = "mongo_database"

    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register the MongoDB client manager and database handle.
        This is the ONLY place where database connections are created.
        """
        manager = MongoClientManager(container.settings)
        container.register_singleton(DatabaseProvider.CLIENT_KEY, manager)
        container.register_singleton(DatabaseProvider.DATABASE_KEY, manager.get_database())
