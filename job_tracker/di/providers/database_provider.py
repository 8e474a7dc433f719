from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import MongoConnection

if TYPE_CHECKING:
    from ..container import DIContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for the DB connection"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register the MongoDB connection in the container.
        The connection is opened later, during application startup.
        """
        container.register_singleton(MongoConnection, MongoConnection(container.settings))
