from datetime import date
from enum import Enum
from typing import Callable, Protocol
from pydantic import BaseModel, Field

from src.scheduling.dates import EARLIEST_DATE, LATEST_DATE, MAX_DEADLINE_DAYS


class ScheduleField(str, Enum):
    START_DATE = "start_date"
    DUE_DATE = "due_date"
    DEADLINE_DAYS = "deadline_days"
    PREDECESSOR_ID = "predecessor_id"


class Predecessor(Protocol):
    id: int
    due_date: date


PredecessorLookup = Callable[[int], Predecessor | None]


class ScheduleDraft(BaseModel):
    start_date: date | None = Field(default=None, ge=EARLIEST_DATE, le=LATEST_DATE)
    due_date: date | None = Field(default=None, ge=EARLIEST_DATE, le=LATEST_DATE)
    deadline_days: int | None = Field(default=None, ge=1, le=MAX_DEADLINE_DAYS)
    predecessor_id: int | None = None


class Schedule(BaseModel):
    start_date: date | None
    due_date: date | None


class ScheduleRequest(ScheduleDraft):
    task_id: int | None = None
    changed_fields: list[ScheduleField] = []
