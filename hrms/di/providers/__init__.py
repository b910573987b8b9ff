"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .employee_provider import EmployeeProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "EmployeeProvider",
]
