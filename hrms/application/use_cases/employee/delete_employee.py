"""
Delete Employee Use Case
========================
"""
import logging

from hrms.domain.exceptions import EmployeeNotFoundError
from hrms.domain.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)


class DeleteEmployeeUseCase:
    """Use case for deleting an employee."""

    def __init__(self, employee_repository: EmployeeRepository):
        self._repository = employee_repository

    def execute(self, employee_id: str) -> None:
        """
        Delete an employee.

        Raises:
            InvalidEmployeeIdError: If employee_id is not a valid id
            EmployeeNotFoundError: If nothing was deleted
            StoreError: On any other store failure
        """
        if not self._repository.delete(employee_id):
            raise EmployeeNotFoundError(employee_id)
        logger.info(f"Employee {employee_id} deleted")
