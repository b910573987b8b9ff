from typing import TYPE_CHECKING, Optional
from ...infrastructure.db.mongo_connection import MongoConnectionManager

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for the DB handle"""

    KEY = "mongo_connection"

    @staticmethod
    def register(container: "BaseContainer", connection: Optional[MongoConnectionManager] = None) -> None:
        """
        Connect to MongoDB and register the connection manager.
        Raises StoreConnectionError if the server cannot be reached, which
        aborts startup before any request is served.
        """
        connection = connection or MongoConnectionManager()
        connection.connect()

        container.register_singleton(DatabaseProvider.KEY, connection)
