"""Task API models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tasktracker.services.id_policy import TaskId


class Task(BaseModel):
    """A tracked task."""

    id: TaskId = Field(description="Integer (reused_integer policy) or UUID (unique_random policy)")
    description: str = Field(description="Free-form task text")
    completed: bool = Field(default=False, description="True once the task has been completed")


class TaskCreateRequest(BaseModel):
    """Payload for creating a task."""

    description: str = Field(description="Free-form task text, may be empty")
