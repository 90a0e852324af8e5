"""Employee model - people tasks can be assigned to."""

from pydantic import BaseModel, Field


class Employee(BaseModel):
    """Employee record. Tasks reference employees, never the other way round."""
    employee_id: str = Field(..., description="Employee ID (text)")
    name: str = Field(..., min_length=1, description="Full name")
    email: str = Field(..., min_length=1, description="Email address")


class EmployeePayload(BaseModel):
    name: str = ""
    email: str = ""


class EmployeeRefPayload(BaseModel):
    employee_id: str
