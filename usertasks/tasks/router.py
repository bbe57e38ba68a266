"""
User Tasks API - Task Router

Task creation, listings and status updates. Creation, the caller's own list
and status updates require a bearer token; the other listings are open.
"""

from typing import Optional, Annotated, List

from fastapi import APIRouter, status, Depends, Query
from motor.motor_asyncio import AsyncIOMotorDatabase

from usertasks.database import get_database
from usertasks.auth.dependencies import CurrentUserId, get_user_repository
from usertasks.auth.repository import UserRepositoryInterface
from usertasks.tasks.service import TaskService
from usertasks.tasks.repository import TaskRepository, TaskRepositoryInterface
from usertasks.tasks.schemas import (
    TaskCreateRequest,
    TaskResponse,
    TaskStatusUpdateResponse,
)


router = APIRouter()

_AUTH_RESPONSES = {
    401: {"description": "Unauthorized - No token provided"},
    403: {"description": "Forbidden - Invalid token"},
}


async def get_task_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> TaskRepositoryInterface:
    """Dependency to get task repository instance."""
    return TaskRepository(db)


async def get_task_service(
    repository: Annotated[TaskRepositoryInterface, Depends(get_task_repository)],
    user_repository: Annotated[UserRepositoryInterface, Depends(get_user_repository)],
) -> TaskService:
    """Dependency to get task service instance."""
    return TaskService(repository, user_repository)


@router.post(
    "/tasks",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Users Operations"],
    summary="Create a new task",
    responses=_AUTH_RESPONSES,
)
async def create_task(
    request: TaskCreateRequest,
    current_user_id: CurrentUserId,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """
    Create a new task for the authenticated user.

    The owner is always the caller; status defaults to TODO.
    """
    return await service.create_task(user_id=current_user_id, request=request)


@router.get(
    "/tasks",
    response_model=List[TaskResponse],
    tags=["Users Operations"],
    summary="Get tasks for logged-in user",
    responses=_AUTH_RESPONSES,
)
async def list_my_tasks(
    current_user_id: CurrentUserId,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> List[TaskResponse]:
    return await service.list_tasks_for_user(current_user_id)


@router.get(
    "/Usertasks",
    response_model=List[TaskResponse],
    tags=["Users"],
    summary="Get all tasks",
)
async def list_all_tasks(
    service: Annotated[TaskService, Depends(get_task_service)],
) -> List[TaskResponse]:
    """Retrieve every task regardless of owner."""
    return await service.list_all_tasks()


@router.get(
    "/tasks/{username}",
    response_model=List[TaskResponse],
    tags=["Users"],
    summary="Get tasks for a specific user",
    responses={404: {"description": "User not found"}},
)
async def list_user_tasks(
    username: str,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> List[TaskResponse]:
    return await service.list_tasks_for_username(username)


@router.put(
    "/tasks/{task_id}/status",
    response_model=TaskStatusUpdateResponse,
    tags=["Users Operations"],
    summary="Update task status",
    responses={
        **_AUTH_RESPONSES,
        400: {"description": "Invalid status value"},
        404: {"description": "Task not found"},
    },
)
async def update_task_status(
    task_id: str,
    current_user_id: CurrentUserId,
    service: Annotated[TaskService, Depends(get_task_service)],
    new_status: Optional[str] = Query(
        default=None,
        alias="status",
        description="New status for the task: TODO, IN_PROGRESS or DONE",
    ),
) -> TaskStatusUpdateResponse:
    """
    Update the status of a task.

    Any authenticated user may change any task. Returns 404 if the task does
    not exist and 400 if the status is not one of the allowed values.
    """
    await service.update_status(task_id, new_status)
    return TaskStatusUpdateResponse(message="Task status updated successfully")
