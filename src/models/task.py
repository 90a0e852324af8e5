"""Task models."""

from typing import Optional
from pydantic import BaseModel, Field


STATUS_CREATED = "Created"
STATUS_COMPLETED = "Completed"


class Task(BaseModel):
    """Task record as held by the task store."""
    task_id: str = Field(..., description="Task ID (text)")
    title: str = Field(..., min_length=1, description="Task title")
    description: str = Field(..., min_length=1, description="Task description")
    category: str = Field(default="", description="Task category (free text)")
    status: str = Field(default=STATUS_CREATED, description="Status: Created, Completed or any caller value")
    creator: str = Field(..., description="Caller identity captured at creation")
    assignee_id: Optional[str] = Field(None, description="Assigned employee ID")
    due_at: int = Field(..., description="Absolute due time (ns)")
    created_at: int = Field(..., description="Creation time (ns)")
    updated_at: Optional[int] = Field(None, description="Last update time (ns)")

    def is_completed(self) -> bool:
        return self.status.lower() == STATUS_COMPLETED.lower()

    def is_past_due(self, now: int) -> bool:
        """Due time has passed and the task is not completed."""
        return self.due_at < now and not self.is_completed()


class TaskPayload(BaseModel):
    """Fields a caller supplies to create or update a task."""
    title: str = ""
    description: str = ""
    category: str = ""
    due_in_minutes: int = 0


class TaskStatusPayload(BaseModel):
    """Status change request."""
    task_id: str
    status: str = ""


class TaskRefPayload(BaseModel):
    """Request naming a single task."""
    task_id: str


class AssignmentPayload(BaseModel):
    task_id: str
    employee_id: str


class StatusFilterPayload(BaseModel):
    status: str


class CategoryFilterPayload(BaseModel):
    category: str


class SearchPayload(BaseModel):
    """Free-text search request."""
    query: str
