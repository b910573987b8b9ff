"""
Domain Exceptions
=================

Error hierarchy raised by repositories and services.
Controllers translate these into HTTP responses:

    HRMSError (base)
    ├── StoreConnectionError     → fatal at startup
    ├── StoreError               → 500 Internal Server Error
    └── EmployeeNotFoundError    → 404 Not Found
        └── InvalidEmployeeIdError → 404 Not Found
"""
from typing import Optional


class HRMSError(Exception):
    """Base exception for all service errors."""

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)


class StoreConnectionError(HRMSError):
    """The document store could not be reached at startup."""


class StoreError(HRMSError):
    """A store call failed while serving a request."""


class EmployeeNotFoundError(HRMSError):
    """No employee document matched the given id."""

    def __init__(self, employee_id: Optional[str] = None, message: Optional[str] = None):
        self.employee_id = employee_id
        super().__init__(message or f"Employee '{employee_id}' not found")


class InvalidEmployeeIdError(EmployeeNotFoundError):
    """
    The id is not a valid ObjectId.

    Subclasses EmployeeNotFoundError so that a malformed id and an unknown
    id produce the same 404 for existing clients.
    """

    def __init__(self, employee_id: Optional[str] = None):
        super().__init__(employee_id, f"'{employee_id}' is not a valid employee id")
