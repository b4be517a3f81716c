# src/taskmate/cli/commands.py

"""
Command dispatch.

`execute(state, line)` is the single entry point used by connectors: it
tokenizes the line once, looks the resolved Command up in the registry,
validates the token shape and runs the handler against `state.tasks`.

Handlers either return a CommandResult or raise a TaskmateError; a raised
error always leaves the task list untouched.
"""

from __future__ import annotations

from collections.abc import Callable

from ..core.state import AppState, CommandResult
from ..parsing.commands import Command
from ..parsing.errors import InvalidCommandKeywordError
from ..parsing.task_parser import parse_task
from ..parsing.tokenizer import ParsedLine, parse_index, to_internal_index, tokenize, validate
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task


CommandHandler = Callable[[AppState, ParsedLine], CommandResult]


class CommandRegistry:
    """Maps each Command to its handler and one-line help text."""

    def __init__(self) -> None:
        self._handlers: dict[Command, CommandHandler] = {}
        self._help: dict[Command, str] = {}

    def register(self, command: Command, handler: CommandHandler, help_text: str) -> None:
        self._handlers[command] = handler
        self._help[command] = help_text

    def handle(self, state: AppState, parsed: ParsedLine) -> CommandResult:
        handler = self._handlers.get(parsed.command)
        if handler is None:
            raise InvalidCommandKeywordError(
                f"Unknown command: '{parsed.keyword}'. Known commands: {self.known_keywords()}."
            )
        validate(parsed)
        return handler(state, parsed)

    def known_keywords(self) -> str:
        return ", ".join(c.value for c in self._handlers)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for command, help_text in self._help.items():
            lines.append(f"  {command.value} - {help_text}")
        return "\n".join(lines)


# ---- list operations driven by validated tokens ----


def task_to_mark(parsed: ParsedLine, tasks: TaskList) -> int:
    """Mark the task named by `parsed` as done; return its 0-based index."""
    index = to_internal_index(parse_index(parsed), tasks.get_size())
    tasks.mark_task_as_done(index)
    return index


def task_to_unmark(parsed: ParsedLine, tasks: TaskList) -> int:
    index = to_internal_index(parse_index(parsed), tasks.get_size())
    tasks.mark_task_as_undone(index)
    return index


def task_to_delete(parsed: ParsedLine, tasks: TaskList) -> Task:
    """Remove the task named by `parsed` and return it."""
    index = to_internal_index(parse_index(parsed), tasks.get_size())
    removed = tasks.get_task(index)
    tasks.delete_task(index)
    return removed


def find_keyword(parsed: ParsedLine, tasks: TaskList) -> TaskList:
    return tasks.find_task(parsed.args[0])


# ---- handlers ----


def cmd_list(state: AppState, parsed: ParsedLine) -> CommandResult:
    return CommandResult(parsed.command, tasks=state.tasks.tasks)


def cmd_mark(state: AppState, parsed: ParsedLine) -> CommandResult:
    return CommandResult(parsed.command, index=task_to_mark(parsed, state.tasks))


def cmd_unmark(state: AppState, parsed: ParsedLine) -> CommandResult:
    return CommandResult(parsed.command, index=task_to_unmark(parsed, state.tasks))


def cmd_create(state: AppState, parsed: ParsedLine) -> CommandResult:
    # Fully parsed before touching the list: a failed parse appends nothing.
    task = parse_task(parsed)
    state.tasks.add(task)
    return CommandResult(parsed.command, task=task)


def cmd_delete(state: AppState, parsed: ParsedLine) -> CommandResult:
    return CommandResult(parsed.command, task=task_to_delete(parsed, state.tasks))


def cmd_find(state: AppState, parsed: ParsedLine) -> CommandResult:
    return CommandResult(parsed.command, tasks=find_keyword(parsed, state.tasks).tasks)


def cmd_bye(state: AppState, parsed: ParsedLine) -> CommandResult:
    return CommandResult(parsed.command, should_exit=True)


registry = CommandRegistry()

registry.register(Command.LIST, cmd_list, help_text="Show all tasks.")
registry.register(Command.TODO, cmd_create, help_text="Add a to-do: todo <description>.")
registry.register(
    Command.DEADLINE,
    cmd_create,
    help_text="Add a deadline: deadline <description> /by <YYYY-MM-DD> <HH:MM>.",
)
registry.register(
    Command.EVENT,
    cmd_create,
    help_text="Add an event: event <description> /from <date> <time> /to <date> <time>.",
)
registry.register(Command.MARK, cmd_mark, help_text="Mark a task as done: mark <number>.")
registry.register(Command.UNMARK, cmd_unmark, help_text="Mark a task as not done: unmark <number>.")
registry.register(Command.DELETE, cmd_delete, help_text="Delete a task: delete <number>.")
registry.register(Command.FIND, cmd_find, help_text="Search descriptions: find <keyword>.")
registry.register(Command.BYE, cmd_bye, help_text="Save and quit.")


def execute(state: AppState, line: str, *, commands: CommandRegistry | None = None) -> CommandResult:
    """Run one input line against `state`."""
    return (commands or registry).handle(state, tokenize(line))
