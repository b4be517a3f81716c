# src/taskmate/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..parsing.commands import Command
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from .ports import TaskRepo


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of one command; only the field relevant to `command` is set."""

    command: Command
    tasks: tuple[Task, ...] | None = None
    task: Task | None = None
    index: int | None = None
    should_exit: bool = False

    @property
    def mutated(self) -> bool:
        return self.command.mutates


@dataclass
class AppState:
    """
    Single-owner application state.

    Built once by cli.bootstrap and passed explicitly to every command
    handler; nothing else holds the task list.
    """

    # Settings object (config.Settings or a SimpleNamespace in tests).
    settings: Any
    store: TaskRepo
    tasks: TaskList = field(default_factory=TaskList)

    def persist(self) -> None:
        self.store.save(self.tasks)
