from fastapi import APIRouter, Depends, status

from src.common.exceptions import (
    ResourceType,
    known_exception_response,
    resource_not_found_response,
)
from src.scheduling.schemas import Schedule, ScheduleRequest
from src.tasks.dependencies import get_task_service
from src.tasks.schemas import (
    CreateTaskRequest,
    MoveTaskRequest,
    Task,
    UpdateTaskRequest,
)
from src.tasks.service import TaskService


router = APIRouter(
    prefix="/tasks",
    tags=["Tasks"],
)


@router.get("")
def list_tasks(task_service: TaskService = Depends(get_task_service)) -> list[Task]:
    return task_service.list_tasks()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_task(
    task_input: CreateTaskRequest,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.create_task(task_input)


@router.post(
    "/schedule",
    responses={**known_exception_response("Task cannot be its own predecessor")},
)
def preview_schedule(
    schedule_input: ScheduleRequest,
    task_service: TaskService = Depends(get_task_service),
) -> Schedule:
    return task_service.preview_schedule(schedule_input)


@router.get("/{task_id}", responses={**resource_not_found_response(ResourceType.TASK)})
def get_task(
    task_id: int, task_service: TaskService = Depends(get_task_service)
) -> Task:
    return task_service.get_task(task_id)


@router.put(
    "/{task_id}",
    responses={
        **resource_not_found_response(ResourceType.TASK),
        **known_exception_response("Task cannot be its own predecessor"),
    },
)
def update_task(
    task_id: int,
    task_input: UpdateTaskRequest,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.update_task(task_id, task_input)


@router.put(
    "/{task_id}/column",
    responses={**resource_not_found_response(ResourceType.TASK)},
)
def move_task(
    task_id: int,
    move_input: MoveTaskRequest,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.move_task(task_id, move_input.column)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**resource_not_found_response(ResourceType.TASK)},
)
def delete_task(task_id: int, task_service: TaskService = Depends(get_task_service)):
    task_service.delete_task(task_id)
