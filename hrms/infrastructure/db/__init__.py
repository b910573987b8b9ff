from .mongo_connection import MongoConnectionManager
from .mongo_employee_repository import MongoEmployeeRepository

__all__ = ["MongoConnectionManager", "MongoEmployeeRepository"]
