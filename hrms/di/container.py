# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    EmployeeProvider,
)
from ..infrastructure.db.mongo_connection import MongoConnectionManager


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connection (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (EmployeeProvider) - depend on repositories
    """

    def __init__(self, connection: Optional[MongoConnectionManager] = None) -> None:
        super().__init__()
        self._connection = connection
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        # Step 1: Register database connection (foundation)
        DatabaseProvider.register(self, self._connection)

        # Step 2: Register repositories (depends on database)
        RepositoryProvider.register(self)

        # Step 3: Register services (depends on repositories)
        EmployeeProvider.register(self)

    @property
    def connection(self) -> MongoConnectionManager:
        return self.get(DatabaseProvider.KEY)

    def shutdown(self) -> None:
        """Release the database connection."""
        self.connection.close()


def build_container(connection: Optional[MongoConnectionManager] = None) -> DIContainer:
    """
    Build a container, connecting to the store.

    Called once from application startup; the result is stored on
    ``app.state`` rather than in a module global.
    """
    return DIContainer(connection)
