# src/taskmate/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..parsing.errors import InvalidTaskIndexError
from .task_models import Task


class TaskList:
    """
    Ordered, in-memory task collection.

    Indices are 0-based here; the user-facing number is index + 1. Every
    indexed access is bounds-checked and raises InvalidTaskIndexError before
    anything is mutated.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __repr__(self) -> str:
        return f"TaskList(size={len(self._tasks)})"

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Read-only snapshot, in order."""
        return tuple(self._tasks)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            raise InvalidTaskIndexError(
                f"Task {index + 1} does not exist (you have {len(self._tasks)} task(s))."
            )

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get_size(self) -> int:
        return len(self._tasks)

    def get_task(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def mark_task_as_done(self, index: int) -> None:
        self.get_task(index).mark_as_done()

    def mark_task_as_undone(self, index: int) -> None:
        self.get_task(index).mark_as_undone()

    def delete_task(self, index: int) -> None:
        self._check_index(index)
        del self._tasks[index]

    def find_task(self, keyword: str) -> TaskList:
        """Tasks whose description contains `keyword` (case-sensitive), in order."""
        return TaskList(t for t in self._tasks if keyword in t.description)
