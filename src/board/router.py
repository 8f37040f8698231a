from fastapi import APIRouter, Depends

from src.board.schemas import Board
from src.tasks.dependencies import get_task_service
from src.tasks.service import TaskService


router = APIRouter(
    prefix="/board",
    tags=["Board"],
)


@router.get("")
def get_board(task_service: TaskService = Depends(get_task_service)) -> Board:
    return task_service.get_board()
