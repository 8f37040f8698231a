import logging

from src.board.schemas import Board
from src.board.service import group_tasks_by_column
from src.common.current_datetime import get_current_datetime
from src.common.exceptions import (
    KnownException,
    ResourceNotFoundException,
    ResourceType,
)
from src.scheduling.dates import EARLIEST_DATE, LATEST_DATE, in_supported_range
from src.scheduling.engine import derive_schedule
from src.scheduling.schemas import (
    Schedule,
    ScheduleDraft,
    ScheduleField,
    ScheduleRequest,
)
from src.tasks.schemas import (
    COLUMN_TO_STATUS,
    CreateTaskRequest,
    KanbanColumn,
    Task,
    TaskData,
    UpdateTaskRequest,
)
from src.tasks.store.base import TaskStore
from src.timeline.layout import build_timeline, timeline_items
from src.timeline.schemas import TimelineLayout

logger = logging.getLogger(__name__)

SCHEDULE_FIELDS = {field.value for field in ScheduleField}


class TaskService:
    def __init__(self, task_store: TaskStore):
        self.task_store = task_store

    def _check_predecessor(self, task_id: int | None, predecessor_id: int | None):
        if task_id is not None and predecessor_id == task_id:
            raise KnownException(f"Task '{task_id}' cannot be its own predecessor")

    def _check_schedule_range(self, schedule: Schedule):
        for day in (schedule.start_date, schedule.due_date):
            if day is not None and not in_supported_range(day):
                raise KnownException(
                    f"Derived date {day.isoformat()} is outside the supported range "
                    f"{EARLIEST_DATE.isoformat()} to {LATEST_DATE.isoformat()}"
                )

    def _schedule(
        self, data: TaskData, changed_fields: set[ScheduleField]
    ) -> TaskData:
        schedule = derive_schedule(
            ScheduleDraft(
                start_date=data.start_date,
                due_date=data.due_date,
                deadline_days=data.deadline_days,
                predecessor_id=data.predecessor_id,
            ),
            self.task_store.get_task,
            changed_fields,
        )
        self._check_schedule_range(schedule)
        return data.model_copy(
            update={"start_date": schedule.start_date, "due_date": schedule.due_date}
        )

    def list_tasks(self) -> list[Task]:
        return self.task_store.list_tasks()

    def get_task(self, task_id: int) -> Task:
        task = self.task_store.get_task(task_id)
        if task is None:
            raise ResourceNotFoundException(ResourceType.TASK, str(task_id))
        return task

    def create_task(self, task_input: CreateTaskRequest) -> Task:
        fields = task_input.model_dump()
        fields["status"] = task_input.status or COLUMN_TO_STATUS[task_input.column]

        changed_fields = (
            {ScheduleField.PREDECESSOR_ID}
            if task_input.predecessor_id is not None
            else set()
        )
        data = self._schedule(TaskData(**fields), changed_fields)

        task = self.task_store.create_task(data, get_current_datetime())
        logger.info("Created task %s [%s]", task.id, task.task_code)
        return task

    def update_task(self, task_id: int, task_input: UpdateTaskRequest) -> Task:
        existing = self.get_task(task_id)
        updates = task_input.model_dump(exclude_unset=True)
        self._check_predecessor(task_id, updates.get("predecessor_id"))

        changed_fields = {
            ScheduleField(name) for name in updates if name in SCHEDULE_FIELDS
        }
        if (
            "predecessor_id" in updates
            and updates["predecessor_id"] == existing.predecessor_id
        ):
            # Re-sending the current predecessor is not a new selection
            changed_fields.discard(ScheduleField.PREDECESSOR_ID)

        merged = TaskData(
            **{
                **existing.model_dump(include=set(TaskData.model_fields)),
                **updates,
            }
        )
        data = self._schedule(merged, changed_fields)

        task = self.task_store.update_task(task_id, data)
        logger.info("Updated task %s: %s", task_id, ", ".join(sorted(updates)))
        return task

    def move_task(self, task_id: int, column: KanbanColumn) -> Task:
        existing = self.get_task(task_id)
        data = TaskData(
            **{
                **existing.model_dump(include=set(TaskData.model_fields)),
                "column": column,
                "status": COLUMN_TO_STATUS[column],
            }
        )

        task = self.task_store.update_task(task_id, data)
        logger.info("Moved task %s to column %s", task_id, column.value)
        return task

    def delete_task(self, task_id: int) -> None:
        if not self.task_store.task_exists(task_id):
            raise ResourceNotFoundException(ResourceType.TASK, str(task_id))

        self.task_store.delete_task(task_id)
        logger.info("Deleted task %s", task_id)

    def preview_schedule(self, schedule_input: ScheduleRequest) -> Schedule:
        self._check_predecessor(schedule_input.task_id, schedule_input.predecessor_id)

        schedule = derive_schedule(
            schedule_input,
            self.task_store.get_task,
            schedule_input.changed_fields,
        )
        self._check_schedule_range(schedule)
        return schedule

    def get_timeline(self) -> TimelineLayout:
        return build_timeline(timeline_items(self.task_store.list_tasks()))

    def get_board(self) -> Board:
        return group_tasks_by_column(self.task_store.list_tasks())
