"""
User Tasks API - Task Repository

Repository pattern for task data access.
Includes MongoDB implementation for runtime and an in-memory one for testing.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional, List

from motor.motor_asyncio import AsyncIOMotorDatabase

from usertasks.tasks.models import Task
from usertasks.tasks.enums import TaskStatus


class TaskRepositoryInterface(ABC):
    """
    Abstract interface for task repository.

    Enables swapping implementations (MongoDB for runtime, in-memory for tests).
    Every operation touches a single document; there are no transactions.
    """

    @abstractmethod
    async def create(self, task: Task) -> Task:
        pass

    @abstractmethod
    async def get_by_id(self, task_id: str) -> Optional[Task]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Task]:
        pass

    @abstractmethod
    async def list_by_user(self, user_id: str) -> List[Task]:
        pass

    @abstractmethod
    async def update_status(self, task_id: str, status: TaskStatus) -> Optional[Task]:
        """Set the status of a task. Returns None if the task is gone."""
        pass


class TaskRepository(TaskRepositoryInterface):
    """MongoDB implementation of the task repository."""

    COLLECTION_NAME = "tasks"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def create(self, task: Task) -> Task:
        await self.collection.insert_one(task.to_dict())
        return task

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        doc = await self.collection.find_one({"_id": task_id})
        if doc is None:
            return None
        return Task.from_dict(doc)

    async def _find(self, query: dict) -> List[Task]:
        cursor = self.collection.find(query).sort("created_at", 1)
        tasks: List[Task] = []
        async for doc in cursor:
            tasks.append(Task.from_dict(doc))
        return tasks

    async def list_all(self) -> List[Task]:
        return await self._find({})

    async def list_by_user(self, user_id: str) -> List[Task]:
        return await self._find({"user_id": user_id})

    async def update_status(self, task_id: str, status: TaskStatus) -> Optional[Task]:
        # Last write wins
        result = await self.collection.find_one_and_update(
            {"_id": task_id},
            {"$set": {"status": status.value, "updated_at": datetime.now(timezone.utc)}},
            return_document=True,
        )
        if result is None:
            return None
        return Task.from_dict(result)


class InMemoryTaskRepository(TaskRepositoryInterface):
    """
    In-memory implementation for CI-safe testing.
    """

    def __init__(self):
        self._tasks: dict[str, Task] = {}

    def clear(self) -> None:
        self._tasks.clear()

    async def create(self, task: Task) -> Task:
        self._tasks[task.id] = task
        return task

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        return self._tasks.get(task_id)

    async def list_all(self) -> List[Task]:
        return list(self._tasks.values())

    async def list_by_user(self, user_id: str) -> List[Task]:
        return [task for task in self._tasks.values() if task.user_id == user_id]

    async def update_status(self, task_id: str, status: TaskStatus) -> Optional[Task]:
        task = self._tasks.get(task_id)
        if task is None:
            return None
        task.status = status
        task.updated_at = datetime.now(timezone.utc)
        return task
