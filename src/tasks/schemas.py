from datetime import date, datetime
from enum import Enum
from typing import Any
from pydantic import BaseModel, Field, field_validator

from src.scheduling.dates import EARLIEST_DATE, LATEST_DATE, MAX_DEADLINE_DAYS


class KanbanColumn(str, Enum):
    BACKLOG = "backlog"
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    DONE = "done"


class TaskStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    PAUSED = "paused"
    DONE = "done"


class TaskColor(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    ORANGE = "orange"
    RED = "red"
    PURPLE = "purple"


# Board order, left to right
COLUMN_ORDER: tuple[KanbanColumn, ...] = tuple(KanbanColumn)

COLUMN_TITLES: dict[KanbanColumn, str] = {
    KanbanColumn.BACKLOG: "Backlog",
    KanbanColumn.TODO: "To Do",
    KanbanColumn.IN_PROGRESS: "In Progress",
    KanbanColumn.REVIEW: "Awaiting Approval",
    KanbanColumn.DONE: "Done",
}

COLUMN_TO_STATUS: dict[KanbanColumn, TaskStatus] = {
    KanbanColumn.BACKLOG: TaskStatus.NOT_STARTED,
    KanbanColumn.TODO: TaskStatus.NOT_STARTED,
    KanbanColumn.IN_PROGRESS: TaskStatus.IN_PROGRESS,
    KanbanColumn.REVIEW: TaskStatus.PAUSED,
    KanbanColumn.DONE: TaskStatus.DONE,
}


class TaskData(BaseModel):
    """The editable fields of a task, as persisted by a task store."""

    title: str
    description: str | None = None
    start_date: date
    due_date: date
    deadline_days: int | None = None
    predecessor_id: int | None = None
    progress: int = 0
    status: TaskStatus = TaskStatus.NOT_STARTED
    color: TaskColor = TaskColor.BLUE
    column: KanbanColumn = KanbanColumn.BACKLOG


class Task(TaskData):
    id: int
    task_code: str
    created_at: datetime


class CreateTaskRequest(BaseModel):
    title: str = Field(..., min_length=3)
    description: str | None = None
    start_date: date = Field(..., ge=EARLIEST_DATE, le=LATEST_DATE)
    due_date: date = Field(..., ge=EARLIEST_DATE, le=LATEST_DATE)
    deadline_days: int | None = Field(default=None, ge=1, le=MAX_DEADLINE_DAYS)
    predecessor_id: int | None = None
    progress: int = Field(default=0, ge=0, le=100)
    status: TaskStatus | None = None
    color: TaskColor = TaskColor.BLUE
    column: KanbanColumn = KanbanColumn.BACKLOG


class UpdateTaskRequest(BaseModel):
    title: str | None = Field(default=None, min_length=3)
    description: str | None = None
    start_date: date | None = Field(default=None, ge=EARLIEST_DATE, le=LATEST_DATE)
    due_date: date | None = Field(default=None, ge=EARLIEST_DATE, le=LATEST_DATE)
    deadline_days: int | None = Field(default=None, ge=1, le=MAX_DEADLINE_DAYS)
    predecessor_id: int | None = None
    progress: int | None = Field(default=None, ge=0, le=100)
    status: TaskStatus | None = None
    color: TaskColor | None = None
    column: KanbanColumn | None = None

    @field_validator(
        "title", "start_date", "due_date", "progress", "status", "color", "column"
    )
    def reject_explicit_null(cls, value: Any):
        # Omitting a field keeps it; sending null for a required field is an error
        if value is None:
            raise ValueError("Field cannot be null")
        return value


class MoveTaskRequest(BaseModel):
    column: KanbanColumn
