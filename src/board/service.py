from collections.abc import Iterable

from src.board.schemas import Board, BoardColumn
from src.tasks.schemas import COLUMN_ORDER, COLUMN_TITLES, COLUMN_TO_STATUS, Task


def group_tasks_by_column(tasks: Iterable[Task]) -> Board:
    grouped: dict[str, list[Task]] = {column.value: [] for column in COLUMN_ORDER}
    for task in tasks:
        grouped[task.column.value].append(task)

    return Board(
        columns=[
            BoardColumn(
                id=column,
                title=COLUMN_TITLES[column],
                status=COLUMN_TO_STATUS[column],
                tasks=grouped[column.value],
            )
            for column in COLUMN_ORDER
        ]
    )
