from datetime import date
from pydantic import BaseModel


class TimelineItem(BaseModel):
    id: int
    start_date: date
    due_date: date
    predecessor_id: int | None = None


class TimelineRow(BaseModel):
    task_id: int
    offset: int
    span: int
    connector_from_task_id: int | None = None
    connector_from_column: int | None = None


class TimelineLayout(BaseModel):
    axis_days: list[date] = []
    weekend_columns: list[int] = []
    rows: list[TimelineRow] = []
