from typing import TYPE_CHECKING
from ...domain.repositories.employee_repository import EmployeeRepository
from ...application.services.employee_service import EmployeeService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class EmployeeProvider:
    """Employee service provider - registers employee-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register employee service.
        Service is created with repository from container.
        """
        container.register_singleton(
            EmployeeService,
            EmployeeService(
                employee_repository=container.get(EmployeeRepository)
            )
        )
