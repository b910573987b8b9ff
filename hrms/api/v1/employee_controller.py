"""
Employee Controller
===================

FastAPI controller for employee CRUD endpoints.
"""
from typing import List

from fastapi import APIRouter, HTTPException, status, Depends

from hrms.application.dto.employee_dto import EmployeeRequest, EmployeeResponse
from hrms.application.services.employee_service import EmployeeService
from hrms.api.v1.dependencies import get_employee_service, get_valid_employee_id
from hrms.domain.exceptions import EmployeeNotFoundError, StoreError
from hrms.domain.models.employee import Employee

router = APIRouter(tags=["employees"])

DELETED_MESSAGE = "record deleted"


def _to_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse(
        id=employee.id,
        name=employee.name,
        salary=employee.salary,
        age=employee.age,
    )


def _not_found(e: EmployeeNotFoundError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=e.message,
    )


def _store_failure(e: StoreError) -> HTTPException:
    # Driver text is passed through unchanged
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(e),
    )


@router.get(
    "",
    response_model=List[EmployeeResponse],
    summary="List employees",
    description="Get every employee in the collection, in the store's natural order.",
)
def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> List[EmployeeResponse]:
    """List all employees."""
    try:
        employees = service.list_employees()
    except StoreError as e:
        raise _store_failure(e)

    return [_to_response(emp) for emp in employees]


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an employee",
    description="""
    Create a new employee.

    Any ``id`` in the request body is discarded; MongoDB assigns the id and
    the stored record is read back and returned.
    """,
)
def create_employee(
    request: EmployeeRequest,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """Create an employee."""
    try:
        employee = service.create_employee(
            name=request.name,
            salary=request.salary,
            age=request.age,
        )
    except StoreError as e:
        raise _store_failure(e)

    return _to_response(employee)


@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    summary="Get employee by ID",
    description="Get a single employee. Malformed and unknown ids both return 404.",
)
def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """Get a specific employee by ID."""
    try:
        employee = service.get_employee(employee_id)
    except EmployeeNotFoundError as e:
        raise _not_found(e)
    except StoreError as e:
        raise _store_failure(e)

    return _to_response(employee)


@router.put(
    "/{employee_id}",
    response_model=EmployeeResponse,
    summary="Update an employee",
    description="""
    Replace name, age and salary of an employee.

    The response echoes the supplied fields with the path id.
    Malformed and unknown ids both return 404.
    """,
)
def update_employee(
    request: EmployeeRequest,
    employee_id: str = Depends(get_valid_employee_id),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """Update an employee."""
    try:
        employee = service.update_employee(
            employee_id=employee_id,
            name=request.name,
            salary=request.salary,
            age=request.age,
        )
    except EmployeeNotFoundError as e:
        raise _not_found(e)
    except StoreError as e:
        raise _store_failure(e)

    return _to_response(employee)


@router.delete(
    "/{employee_id}",
    response_model=str,
    summary="Delete an employee",
    description="Delete an employee. Malformed and unknown ids both return 404.",
)
def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> str:
    """Delete an employee."""
    try:
        service.delete_employee(employee_id)
    except EmployeeNotFoundError as e:
        raise _not_found(e)
    except StoreError as e:
        raise _store_failure(e)

    return DELETED_MESSAGE
