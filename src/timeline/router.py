from fastapi import APIRouter, Depends

from src.tasks.dependencies import get_task_service
from src.tasks.service import TaskService
from src.timeline.schemas import TimelineLayout


router = APIRouter(
    prefix="/timeline",
    tags=["Timeline"],
)


@router.get("")
def get_timeline(
    task_service: TaskService = Depends(get_task_service),
) -> TimelineLayout:
    return task_service.get_timeline()
