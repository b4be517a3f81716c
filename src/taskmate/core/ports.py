# src/taskmate/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Handlers depend on these Protocols instead of concrete classes, so the file
store can be swapped for an in-memory fake in tests.
"""

from typing import Iterable, Protocol

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Persistence for the whole task list (load once, save after each change)."""

    def load(self) -> TaskList: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
