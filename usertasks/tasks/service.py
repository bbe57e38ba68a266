"""
User Tasks API - Task Service

Business logic for task creation, listing and status changes.
"""

import logging
from typing import Optional, List

from usertasks.auth.repository import UserRepositoryInterface
from usertasks.errors import InvalidStatusError, TaskNotFoundError, UserNotFoundError
from usertasks.tasks.models import Task
from usertasks.tasks.repository import TaskRepositoryInterface
from usertasks.tasks.enums import TaskStatus
from usertasks.tasks.schemas import TaskCreateRequest, TaskResponse

logger = logging.getLogger(__name__)


class TaskService:
    """Service layer for task business logic."""

    def __init__(
        self,
        repository: TaskRepositoryInterface,
        user_repository: UserRepositoryInterface,
    ):
        self.repository = repository
        self.user_repository = user_repository

    @staticmethod
    def _task_to_response(task: Task) -> TaskResponse:
        return TaskResponse(
            id=task.id,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            status=task.status,
            user_id=task.user_id,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

    async def create_task(self, user_id: str, request: TaskCreateRequest) -> TaskResponse:
        """Create a new task owned by user_id."""
        task = Task.create(
            user_id=user_id,
            title=request.title,
            status=request.status,
            description=request.description,
            due_date=request.due_date,
        )
        await self.repository.create(task)
        logger.info(f"Created task {task.id} for user {user_id}")
        return self._task_to_response(task)

    async def list_all_tasks(self) -> List[TaskResponse]:
        tasks = await self.repository.list_all()
        return [self._task_to_response(t) for t in tasks]

    async def list_tasks_for_user(self, user_id: str) -> List[TaskResponse]:
        tasks = await self.repository.list_by_user(user_id)
        return [self._task_to_response(t) for t in tasks]

    async def list_tasks_for_username(self, username: str) -> List[TaskResponse]:
        """List the tasks of the user with this username."""
        user = await self.user_repository.get_by_username(username)
        if user is None:
            raise UserNotFoundError()
        return await self.list_tasks_for_user(user.id)

    async def update_status(self, task_id: str, status: Optional[str]) -> TaskResponse:
        """
        Change the status of a task.

        The task must exist before the new value is checked, so an unknown
        task is reported even when the status is also invalid.
        """
        task = await self.repository.get_by_id(task_id)
        if task is None:
            raise TaskNotFoundError()

        new_status = TaskStatus.parse(status)
        if new_status is None:
            raise InvalidStatusError()

        previous = task.status
        updated = await self.repository.update_status(task_id, new_status)
        if updated is None:
            raise TaskNotFoundError()
        logger.info(f"Task {task_id} status {previous.value} -> {new_status.value}")
        return self._task_to_response(updated)
