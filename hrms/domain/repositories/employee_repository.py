"""
Employee Repository Interface
=============================

Abstract interface for employee data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from hrms.domain.models.employee import Employee


class EmployeeRepository(ABC):
    """
    Abstract repository for employee persistence operations.

    Implementations raise ``InvalidEmployeeIdError`` for ids that are not in
    the store's native format and ``StoreError`` for any driver failure.
    """

    @abstractmethod
    def find_all(self) -> List[Employee]:
        """
        Return every employee in store order.

        Returns:
            List of employee entities (empty when the collection is empty)
        """
        pass

    @abstractmethod
    def insert(self, employee: Employee) -> str:
        """
        Insert a new employee document.

        Args:
            employee: Employee entity without an id

        Returns:
            Id assigned by the store
        """
        pass

    @abstractmethod
    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        """
        Find an employee by id.

        Args:
            employee_id: Store-assigned identifier

        Returns:
            Employee entity if found, None otherwise
        """
        pass

    @abstractmethod
    def update(self, employee_id: str, employee: Employee) -> bool:
        """
        Set name, age and salary on the matching document.

        Args:
            employee_id: Store-assigned identifier
            employee: Entity carrying the new field values

        Returns:
            True if a document matched, False otherwise
        """
        pass

    @abstractmethod
    def delete(self, employee_id: str) -> bool:
        """
        Delete the matching document.

        Args:
            employee_id: Store-assigned identifier

        Returns:
            True if a document was deleted, False otherwise
        """
        pass
