from .employee_dto import EmployeeRequest, EmployeeResponse

__all__ = ["EmployeeRequest", "EmployeeResponse"]
