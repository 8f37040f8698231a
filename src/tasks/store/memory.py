import itertools
import logging
import random
from datetime import datetime

from src.common.exceptions import ResourceNotFoundException, ResourceType
from src.tasks.schemas import Task, TaskData
from src.tasks.store.base import TaskStore

logger = logging.getLogger(__name__)


class InMemoryTaskStore(TaskStore):
    """Keeps tasks in a dict keyed by id; ids start at 1 and are never reused."""

    def __init__(
        self,
        *,
        task_code_min: int = 100,
        task_code_max: int = 999,
        rng: random.Random | None = None,
    ):
        self.tasks: dict[int, Task] = {}
        self._ids = itertools.count(1)
        self.task_code_min = task_code_min
        self.task_code_max = task_code_max
        self.rng = rng or random.Random()

    def _get_existing(self, task_id: int) -> Task:
        task = self.tasks.get(task_id)
        if task is None:
            raise ResourceNotFoundException(ResourceType.TASK, str(task_id))
        return task

    def _generate_task_code(self) -> str:
        used_codes = {task.task_code for task in self.tasks.values()}
        capacity = self.task_code_max - self.task_code_min + 1

        code = str(self.rng.randint(self.task_code_min, self.task_code_max))
        if len(used_codes) >= capacity:
            logger.warning("All task codes are in use, reusing code %s", code)
            return code

        while code in used_codes:
            code = str(self.rng.randint(self.task_code_min, self.task_code_max))
        return code

    def task_exists(self, task_id: int) -> bool:
        return task_id in self.tasks

    def create_task(self, data: TaskData, timestamp: datetime) -> Task:
        task = Task(
            id=next(self._ids),
            task_code=self._generate_task_code(),
            created_at=timestamp,
            **data.model_dump(),
        )
        self.tasks[task.id] = task
        return task

    def get_task(self, task_id: int) -> Task | None:
        return self.tasks.get(task_id)

    def update_task(self, task_id: int, data: TaskData) -> Task:
        existing = self._get_existing(task_id)
        updated = existing.model_copy(update=data.model_dump())
        self.tasks[task_id] = updated
        return updated

    def delete_task(self, task_id: int) -> None:
        self._get_existing(task_id)
        del self.tasks[task_id]

    def list_tasks(self) -> list[Task]:
        return list(self.tasks.values())
