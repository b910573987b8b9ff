"""
Domain Layer
============

Core business objects and repository contracts.
This layer has no dependencies on web frameworks or database drivers.

Contains:
- Models: Employee domain object
- Repository Interfaces: Abstract contract for employee persistence
- Exceptions: Error hierarchy shared by every layer
"""
