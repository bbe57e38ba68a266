"""
User Tasks API - Task Schemas

Pydantic models for task API requests and responses. Fields travel in
camelCase on the wire (``dueDate``, ``userId``).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from usertasks.tasks.enums import TaskStatus


class TaskCreateRequest(BaseModel):
    """Request model for creating a task. The owner comes from the token."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(min_length=1, description="Task title")
    description: Optional[str] = Field(default=None, description="Task description")
    due_date: Optional[str] = Field(default=None, description="Due date, free-form")
    status: TaskStatus = Field(default=TaskStatus.TODO, description="Task status")


class TaskResponse(BaseModel):
    """Response model for a single task."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(description="Task ID")
    title: str = Field(description="Task title")
    description: Optional[str] = Field(default=None, description="Task description")
    due_date: Optional[str] = Field(default=None, description="Due date")
    status: TaskStatus = Field(description="Task status")
    user_id: str = Field(description="Owner user ID")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")


class TaskStatusUpdateResponse(BaseModel):
    """Response model for a status change."""

    message: str = Field(description="Success message")
