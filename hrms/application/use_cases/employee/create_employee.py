"""
Create Employee Use Case
========================

Inserts a new employee and reads back the stored record.
"""
import logging

from hrms.domain.exceptions import StoreError
from hrms.domain.models.employee import Employee
from hrms.domain.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)


class CreateEmployeeUseCase:
    """Use case for creating an employee."""

    def __init__(self, employee_repository: EmployeeRepository):
        self._repository = employee_repository

    def execute(self, name: str, salary: float, age: int) -> Employee:
        """
        Create an employee and return the canonical stored form.

        Args:
            name: Employee name
            salary: Employee salary
            age: Employee age

        Returns:
            Stored employee entity including the generated id

        Raises:
            StoreError: If the insert or the read-back fails
        """
        # Built without an id so MongoDB assigns one
        employee = Employee(name=name, salary=salary, age=age)

        employee_id = self._repository.insert(employee)
        created = self._repository.find_by_id(employee_id)
        if created is None:
            raise StoreError(f"Inserted employee '{employee_id}' could not be read back")

        logger.info(f"Employee {employee_id} created")
        return created
