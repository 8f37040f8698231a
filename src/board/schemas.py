from pydantic import BaseModel

from src.tasks.schemas import KanbanColumn, Task, TaskStatus


class BoardColumn(BaseModel):
    id: KanbanColumn
    title: str
    status: TaskStatus
    tasks: list[Task]


class Board(BaseModel):
    columns: list[BoardColumn]
