"""
User Tasks API - Task Enums
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Task status values. Any status may move to any other."""
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"

    @classmethod
    def parse(cls, value: object) -> "TaskStatus | None":
        """Return the matching status, or None if value is not one of them."""
        try:
            return cls(value)
        except ValueError:
            return None
