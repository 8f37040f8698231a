"""Gantt geometry: one column per calendar day, one row per task.

Offsets and spans are expressed in day columns; turning them into pixels is
left to whatever renders the layout.
"""

from collections.abc import Iterable, Sequence

from src.scheduling.dates import add_days, days_between, each_day, is_weekend
from src.tasks.schemas import Task
from src.timeline.schemas import TimelineItem, TimelineLayout, TimelineRow

# Days of padding around the earliest and latest task dates
LEAD_DAYS = 1
TRAIL_DAYS = 3


def timeline_items(tasks: Iterable[Task]) -> list[TimelineItem]:
    return [
        TimelineItem(
            id=task.id,
            start_date=task.start_date,
            due_date=task.due_date,
            predecessor_id=task.predecessor_id,
        )
        for task in tasks
    ]


def build_timeline(items: Sequence[TimelineItem]) -> TimelineLayout:
    if not items:
        return TimelineLayout()

    all_dates = [day for item in items for day in (item.start_date, item.due_date)]
    axis_start = add_days(min(all_dates), -LEAD_DAYS)
    axis_end = add_days(max(all_dates), TRAIL_DAYS)
    axis_days = each_day(axis_start, axis_end)

    by_id = {item.id: item for item in items}
    rows: list[TimelineRow] = []

    for item in sorted(items, key=lambda item: item.start_date):
        row = TimelineRow(
            task_id=item.id,
            offset=max(0, days_between(axis_start, item.start_date)),
            span=max(1, days_between(item.start_date, item.due_date) + 1),
        )

        predecessor = (
            by_id.get(item.predecessor_id) if item.predecessor_id is not None else None
        )
        if predecessor is not None:
            row.connector_from_task_id = predecessor.id
            row.connector_from_column = days_between(axis_start, predecessor.due_date)

        rows.append(row)

    return TimelineLayout(
        axis_days=axis_days,
        weekend_columns=[
            index for index, day in enumerate(axis_days) if is_weekend(day)
        ],
        rows=rows,
    )
