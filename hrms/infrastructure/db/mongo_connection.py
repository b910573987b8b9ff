"""
MongoDB Connection
==================

Connection manager holding the single MongoDB handle for the process.
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from hrms.core.config import Settings, get_settings
from hrms.domain.exceptions import StoreConnectionError

logger = logging.getLogger(__name__)


class MongoConnectionManager:
    """
    Owns the MongoClient and the selected database.

    ``connect`` is called once during application startup. The client keeps
    its own connection pool and is safe to share across request threads.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory=MongoClient,
    ) -> None:
        self._settings = settings or get_settings()
        self._client_factory = client_factory
        self._client: Optional[MongoClient] = None
        self._database: Optional[Database] = None

    @property
    def is_connected(self) -> bool:
        return self._database is not None

    def connect(self) -> Database:
        """
        Open the client, verify the server answers, and select the database.

        Returns:
            MongoDB Database handle

        Raises:
            StoreConnectionError: If the server is unreachable within the timeout
        """
        if self._database is not None:
            return self._database

        timeout_ms = self._settings.mongo_connect_timeout_sec * 1000
        db_name = self._settings.mongo_database_name

        try:
            client = self._client_factory(
                self._settings.mongo_uri,
                serverSelectionTimeoutMS=timeout_ms,
                connectTimeoutMS=timeout_ms,
            )
            # MongoClient connects lazily; ping forces a round trip
            client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"Could not connect to MongoDB at {self._settings.mongo_uri}: {e}")
            raise StoreConnectionError(f"Could not connect to MongoDB: {e}") from e

        self._client = client
        self._database = client[db_name]
        logger.info(f"Connected to MongoDB: {db_name}")
        return self._database

    def get_database(self) -> Database:
        """Get MongoDB database instance, connecting on first use."""
        if self._database is None:
            return self.connect()
        return self._database

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB Collection object
        """
        return self.get_database()[collection_name]

    def close(self) -> None:
        """Close MongoDB connection."""
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed")
        self._client = None
        self._database = None
