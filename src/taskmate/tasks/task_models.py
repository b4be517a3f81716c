# src/taskmate/tasks/task_models.py

"""
Task variants.

ToDo, Deadline and Event are independent dataclasses tagged by `kind`.
`Task` is their union; code that needs variant-specific fields branches on
the tag instead of relying on a shared base class.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from enum import StrEnum
from typing import ClassVar, TypeAlias

DISPLAY_DATE_FORMAT = "%b %d %Y"
DISPLAY_TIME_FORMAT = "%H:%M"


class TaskKind(StrEnum):
    """One-letter tag used in rendering and in the storage file."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def format_when(d: date, t: time) -> str:
    return f"{d.strftime(DISPLAY_DATE_FORMAT)} {t.strftime(DISPLAY_TIME_FORMAT)}"


def _status_icon(is_done: bool) -> str:
    return "X" if is_done else " "


@dataclass(slots=True)
class ToDo:
    kind: ClassVar[TaskKind] = TaskKind.TODO

    description: str
    is_done: bool = field(default=False, kw_only=True)

    @property
    def status_icon(self) -> str:
        return _status_icon(self.is_done)

    def mark_as_done(self) -> None:
        self.is_done = True

    def mark_as_undone(self) -> None:
        self.is_done = False

    def __str__(self) -> str:
        return f"[{self.kind}][{self.status_icon}] {self.description}"


@dataclass(slots=True)
class Deadline:
    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    description: str
    due_date: date
    due_time: time
    is_done: bool = field(default=False, kw_only=True)

    @property
    def status_icon(self) -> str:
        return _status_icon(self.is_done)

    def mark_as_done(self) -> None:
        self.is_done = True

    def mark_as_undone(self) -> None:
        self.is_done = False

    def __str__(self) -> str:
        by = format_when(self.due_date, self.due_time)
        return f"[{self.kind}][{self.status_icon}] {self.description} (by: {by})"


@dataclass(slots=True)
class Event:
    """
    A task spanning a start and an end moment.

    End before start is accepted as given; nothing compares the two.
    """

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    description: str
    start_date: date
    start_time: time
    end_date: date
    end_time: time
    is_done: bool = field(default=False, kw_only=True)

    @property
    def status_icon(self) -> str:
        return _status_icon(self.is_done)

    def mark_as_done(self) -> None:
        self.is_done = True

    def mark_as_undone(self) -> None:
        self.is_done = False

    def __str__(self) -> str:
        start = format_when(self.start_date, self.start_time)
        end = format_when(self.end_date, self.end_time)
        return f"[{self.kind}][{self.status_icon}] {self.description} (from: {start} to: {end})"


Task: TypeAlias = ToDo | Deadline | Event
