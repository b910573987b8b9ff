from .create_employee import CreateEmployeeUseCase
from .update_employee import UpdateEmployeeUseCase
from .delete_employee import DeleteEmployeeUseCase

__all__ = ["CreateEmployeeUseCase", "UpdateEmployeeUseCase", "DeleteEmployeeUseCase"]
