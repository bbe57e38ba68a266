"""
User Tasks API - Task Models

Internal task model for database operations.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
import uuid

from usertasks.tasks.enums import TaskStatus


def _utcnow() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


@dataclass
class Task:
    """Task entity for database storage."""

    id: str
    user_id: str
    title: str
    status: TaskStatus = TaskStatus.TODO
    description: Optional[str] = None
    due_date: Optional[str] = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(
        cls,
        user_id: str,
        title: str,
        status: TaskStatus = TaskStatus.TODO,
        description: Optional[str] = None,
        due_date: Optional[str] = None,
    ) -> "Task":
        """Create a new task with generated ID."""
        now = _utcnow()
        return cls(
            id=str(uuid.uuid4()),
            user_id=user_id,
            title=title,
            status=status,
            description=description,
            due_date=due_date,
            created_at=now,
            updated_at=now,
        )

    def to_dict(self) -> dict:
        """Convert task to dictionary for MongoDB storage."""
        return {
            "_id": self.id,
            "user_id": self.user_id,
            "title": self.title,
            "status": self.status.value,
            "description": self.description,
            "due_date": self.due_date,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create task from MongoDB document."""
        return cls(
            id=data["_id"],
            user_id=data["user_id"],
            title=data["title"],
            status=TaskStatus(data.get("status", TaskStatus.TODO.value)),
            description=data.get("description"),
            due_date=data.get("due_date"),
            created_at=data["created_at"],
            updated_at=data.get("updated_at", data["created_at"]),
        )
