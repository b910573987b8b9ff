"""
Update Employee Use Case
========================

Replaces name, age and salary on an existing employee.
"""
import logging

from hrms.domain.exceptions import EmployeeNotFoundError
from hrms.domain.models.employee import Employee
from hrms.domain.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)


class UpdateEmployeeUseCase:
    """Use case for updating an employee."""

    def __init__(self, employee_repository: EmployeeRepository):
        self._repository = employee_repository

    def execute(self, employee_id: str, name: str, salary: float, age: int) -> Employee:
        """
        Update an employee's mutable fields.

        The returned entity echoes the supplied values with the path id; it
        is not re-read from the store.

        Raises:
            InvalidEmployeeIdError: If employee_id is not a valid id
            EmployeeNotFoundError: If no employee matches
            StoreError: On any other store failure
        """
        employee = Employee(name=name, salary=salary, age=age)

        if not self._repository.update(employee_id, employee):
            raise EmployeeNotFoundError(employee_id)

        employee.id = employee_id
        logger.info(f"Employee {employee_id} updated")
        return employee
