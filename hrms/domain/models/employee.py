"""
Employee Model
==============

Domain model representing an employee record.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Employee:
    """
    Employee domain model.

    ``id`` is assigned by the store on insert and is ``None`` until then.
    No constraints are enforced on the remaining fields.
    """
    name: str = ""
    salary: float = 0.0
    age: int = 0
    id: Optional[str] = None
