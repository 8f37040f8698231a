from abc import ABC, abstractmethod
from datetime import datetime

from src.tasks.schemas import Task, TaskData


class TaskStore(ABC):
    @abstractmethod
    def task_exists(self, task_id: int) -> bool:
        pass

    @abstractmethod
    def create_task(self, data: TaskData, timestamp: datetime) -> Task:
        pass

    @abstractmethod
    def get_task(self, task_id: int) -> Task | None:
        pass

    @abstractmethod
    def update_task(self, task_id: int, data: TaskData) -> Task:
        pass

    @abstractmethod
    def delete_task(self, task_id: int) -> None:
        pass

    @abstractmethod
    def list_tasks(self) -> list[Task]:
        pass
