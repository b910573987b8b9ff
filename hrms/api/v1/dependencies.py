"""
Request Dependencies
====================

Resolve services from the DI container attached to the application at startup.
"""
from bson import ObjectId
from fastapi import HTTPException, Request, status

from hrms.application.services.employee_service import EmployeeService
from hrms.di.container import DIContainer
from hrms.domain.exceptions import InvalidEmployeeIdError


def get_container(request: Request) -> DIContainer:
    """
    Get the DI container built during application startup.

    Returns:
        DIContainer instance stored on ``app.state``
    """
    return request.app.state.container


def get_employee_service(request: Request) -> EmployeeService:
    """
    Get employee service instance (singleton per container).

    Returns:
        EmployeeService instance
    """
    return get_container(request).get(EmployeeService)


def get_valid_employee_id(employee_id: str) -> str:
    """
    Check the path id before the request body is validated.

    Dependencies resolve ahead of body validation, so a malformed id is a
    404 even when the body is also invalid.
    """
    if not ObjectId.is_valid(employee_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=InvalidEmployeeIdError(employee_id).message,
        )
    return employee_id
