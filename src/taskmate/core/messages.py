# src/taskmate/core/messages.py

"""User-facing text for command results."""

from __future__ import annotations

from collections.abc import Sequence

from .state import CommandResult
from ..parsing.commands import Command
from ..tasks.task_models import Task

GREETING = "Hello! I'm {app_name}. What can I do for you?"
FAREWELL = "Bye. Hope to see you again soon!"


def _count_line(n: int) -> str:
    noun = "task" if n == 1 else "tasks"
    return f"Now you have {n} {noun} in the list."


def format_task_lines(tasks: Sequence[Task]) -> list[str]:
    return [f"{i}. {t}" for i, t in enumerate(tasks, start=1)]


def render_result(result: CommandResult, tasks: Sequence[Task]) -> str:
    """
    Render `result` for the console.

    `tasks` is the full list after the command ran (used for counts and to
    show the task a mark/unmark touched).
    """
    command = result.command

    if command is Command.LIST:
        items = result.tasks or ()
        if not items:
            return "Your task list is empty."
        return "\n".join(["Here are the tasks in your list:", *format_task_lines(items)])

    if command is Command.FIND:
        items = result.tasks or ()
        if not items:
            return "No matching tasks found."
        return "\n".join(["Here are the matching tasks in your list:", *format_task_lines(items)])

    if command is Command.MARK and result.index is not None:
        return f"Nice! I've marked this task as done:\n  {tasks[result.index]}"

    if command is Command.UNMARK and result.index is not None:
        return f"OK, I've marked this task as not done yet:\n  {tasks[result.index]}"

    if command.is_creation and result.task is not None:
        return f"Got it. I've added this task:\n  {result.task}\n{_count_line(len(tasks))}"

    if command is Command.DELETE and result.task is not None:
        return f"Noted. I've removed this task:\n  {result.task}\n{_count_line(len(tasks))}"

    if command is Command.BYE:
        return FAREWELL

    return ""
