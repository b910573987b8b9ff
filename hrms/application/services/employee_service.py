"""
Employee Service
================

Application service that coordinates employee-related operations.
This service orchestrates the employee use cases.
"""
from typing import List

from hrms.domain.exceptions import EmployeeNotFoundError
from hrms.domain.models.employee import Employee
from hrms.domain.repositories.employee_repository import EmployeeRepository
from hrms.application.use_cases.employee.create_employee import CreateEmployeeUseCase
from hrms.application.use_cases.employee.update_employee import UpdateEmployeeUseCase
from hrms.application.use_cases.employee.delete_employee import DeleteEmployeeUseCase


class EmployeeService:
    """
    Application service for employee operations.

    This service coordinates the use cases and provides a high-level
    interface for employee management.
    """

    def __init__(self, employee_repository: EmployeeRepository):
        """
        Initialize service with repository.

        Args:
            employee_repository: Repository for employee persistence
        """
        self._repository = employee_repository
        self._create_use_case = CreateEmployeeUseCase(employee_repository)
        self._update_use_case = UpdateEmployeeUseCase(employee_repository)
        self._delete_use_case = DeleteEmployeeUseCase(employee_repository)

    def list_employees(self) -> List[Employee]:
        """
        List every employee.

        Returns:
            List of employee entities in store order
        """
        return self._repository.find_all()

    def get_employee(self, employee_id: str) -> Employee:
        """
        Get an employee by id.

        Raises:
            EmployeeNotFoundError: If the id is malformed or unknown
        """
        employee = self._repository.find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    def create_employee(self, name: str, salary: float, age: int) -> Employee:
        """
        Create an employee.

        Returns:
            Stored employee entity with its generated id
        """
        return self._create_use_case.execute(name=name, salary=salary, age=age)

    def update_employee(self, employee_id: str, name: str, salary: float, age: int) -> Employee:
        """
        Replace name, salary and age of an employee.

        Returns:
            Employee carrying the supplied values and the given id
        """
        return self._update_use_case.execute(
            employee_id=employee_id,
            name=name,
            salary=salary,
            age=age,
        )

    def delete_employee(self, employee_id: str) -> None:
        """Delete an employee."""
        self._delete_use_case.execute(employee_id)
