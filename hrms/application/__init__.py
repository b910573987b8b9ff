"""
Application Layer
=================

Application services and use cases.
This layer orchestrates the Employee entity and its repository.

Contains:
- Use Cases: Business operations (create, update, delete employee)
- Services: Application service that coordinates the use cases
- DTOs: Pydantic request/response models
"""
