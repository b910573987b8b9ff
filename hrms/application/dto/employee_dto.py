"""
Employee DTO
============

Pydantic models for employee API requests and responses.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class EmployeeRequest(BaseModel):
    """DTO for creating or updating an employee. Any ``id`` sent by the client is ignored."""
    id: Optional[str] = Field(None, description="Ignored on input; the store assigns ids")
    name: str = Field("", description="Employee name")
    salary: float = Field(0.0, description="Employee salary")
    # BSON stores integers as int64 at most
    age: int = Field(0, ge=INT64_MIN, le=INT64_MAX, description="Employee age")

    model_config = ConfigDict(
        allow_inf_nan=False,
        json_schema_extra={
            "example": {
                "name": "Ana",
                "salary": 5000,
                "age": 30,
            }
        }
    )


class EmployeeResponse(BaseModel):
    """DTO for employee data."""
    id: str
    name: str
    salary: float
    age: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "6650c7c2e4b0a1f2d3c4b5a6",
                "name": "Ana",
                "salary": 5000.0,
                "age": 30,
            }
        }
    )
