from fastapi import APIRouter, Depends, Path, status
from typing import Annotated
from database import get_task_service
from middleware.auth import get_caller
from schemas import (
    MAX_TASK_ID,
    ApiResponse,
    Caller,
    TaskCheckedUpdate,
    TaskCreate,
    TaskListResponse,
    TaskPrivateUpdate,
    TaskResponse,
)
from services.tasks import TaskService

router = APIRouter()


@router.get("/tasks")
async def list_tasks(
    hide_checked: bool = False,
    caller: Caller = Depends(get_caller),
    service: TaskService = Depends(get_task_service)
) -> ApiResponse:
    """
    Get the tasks visible to the caller

    Args:
        hide_checked: Leave out checked tasks
        caller: Identity resolved from the Authorization header
        service: Task service

    Returns:
        ApiResponse with the tasks, newest first, and the incomplete count
    """
    tasks = service.list_visible(caller, hide_checked=hide_checked)

    return ApiResponse(
        success=True,
        data=TaskListResponse(
            tasks=[TaskResponse.model_validate(task) for task in tasks],
            incomplete_count=service.count_incomplete(caller)
        ).model_dump()
    )


@router.post("/tasks", status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: TaskCreate,
    caller: Caller = Depends(get_caller),
    service: TaskService = Depends(get_task_service)
) -> ApiResponse:
    """
    Create a new task owned by the caller

    Returns:
        ApiResponse with the new task id
    """
    task_id = service.insert(caller, task_data.text)

    return ApiResponse(success=True, data={"id": task_id})


@router.delete("/tasks/{task_id}")
async def delete_task(
    task_id: Annotated[int, Path(ge=1, le=MAX_TASK_ID)],
    caller: Caller = Depends(get_caller),
    service: TaskService = Depends(get_task_service)
) -> ApiResponse:
    """Delete a task the caller owns"""
    service.remove(caller, task_id)

    return ApiResponse(success=True)


@router.patch("/tasks/{task_id}/checked")
async def set_task_checked(
    task_id: Annotated[int, Path(ge=1, le=MAX_TASK_ID)],
    update: TaskCheckedUpdate,
    caller: Caller = Depends(get_caller),
    service: TaskService = Depends(get_task_service)
) -> ApiResponse:
    """Set the checked flag on a task the caller owns"""
    service.set_checked(caller, task_id, update.checked)

    return ApiResponse(success=True)


@router.patch("/tasks/{task_id}/private")
async def set_task_private(
    task_id: Annotated[int, Path(ge=1, le=MAX_TASK_ID)],
    update: TaskPrivateUpdate,
    caller: Caller = Depends(get_caller),
    service: TaskService = Depends(get_task_service)
) -> ApiResponse:
    """Set the private flag on a task the caller owns"""
    service.set_private(caller, task_id, update.private)

    return ApiResponse(success=True)
