from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.employee_repository import EmployeeRepository
from ...infrastructure.db.mongo_employee_repository import MongoEmployeeRepository
from .database_provider import DatabaseProvider

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register repository implementations.
        Gets the connection from the database provider registration.
        """
        connection = container.get(DatabaseProvider.KEY)

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            EmployeeRepository,
            MongoEmployeeRepository(
                connection,
                collection_name=get_settings().employees_collection,
            ),
        )
