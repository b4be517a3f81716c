# src/taskmate/parsing/task_parser.py

"""
Builds ToDo/Deadline/Event objects from validated creation lines.

Deadline and event lines are cut on the literal separators from the
tokenizer module; every date/time piece must then parse on its own:

    deadline <description> /by <date> <time>
    event <description> /from <date> <time> /to <date> <time>

Dates are strict YYYY-MM-DD. Times are 24-hour HH:MM, HH:MM:SS or the
compact HHMM form.
"""

from __future__ import annotations

import re
from datetime import date, time

from ..tasks.task_models import Deadline, Event, Task, ToDo
from .commands import Command
from .errors import InvalidDateTimeError, InvalidDescriptionError
from .tokenizer import (
    BY_SEPARATOR,
    FROM_SEPARATOR,
    TO_SEPARATOR,
    TOKEN_SEPARATOR,
    ParsedLine,
    tokenize,
    validate,
)

DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIME_RE = re.compile(r"(?P<h>[0-9]{2}):(?P<m>[0-9]{2})(?::(?P<s>[0-9]{2}))?")
COMPACT_TIME_RE = re.compile(r"(?P<h>[0-9]{2})(?P<m>[0-9]{2})")


def parse_date(text: str) -> date:
    if not DATE_RE.fullmatch(text):
        raise InvalidDateTimeError(f"'{text}' is not a date (expected YYYY-MM-DD).")
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise InvalidDateTimeError(f"'{text}' is not a valid calendar date.") from None


def parse_time(text: str) -> time:
    m = TIME_RE.fullmatch(text) or COMPACT_TIME_RE.fullmatch(text)
    if not m:
        raise InvalidDateTimeError(f"'{text}' is not a time (expected HH:MM or HHMM).")
    seconds = m.groupdict().get("s") or 0
    try:
        return time(int(m.group("h")), int(m.group("m")), int(seconds))
    except ValueError:
        raise InvalidDateTimeError(f"'{text}' is not a valid time of day.") from None


def parse_date_time(text: str) -> tuple[date, time]:
    """Parse "<date> <time>"; exactly two space-separated parts are required."""
    parts = text.split(TOKEN_SEPARATOR)
    if len(parts) != 2:
        raise InvalidDateTimeError(
            f"'{text}' should be a date and a time, e.g. 2024-12-01 18:00."
        )
    return parse_date(parts[0]), parse_time(parts[1])


def _split_once(text: str, separator: str) -> tuple[str, str]:
    # Leading space lets a line like "deadline /by ..." yield an empty description.
    parts = (TOKEN_SEPARATOR + text).split(separator)
    if len(parts) != 2:
        raise InvalidDateTimeError(
            f"Expected exactly one '{separator.strip()}' in the command."
        )
    head, tail = parts
    return head[len(TOKEN_SEPARATOR):], tail


def _require_description(description: str) -> str:
    if not description.strip():
        raise InvalidDescriptionError()
    return description


def parse_todo(parsed: ParsedLine) -> ToDo:
    return ToDo(_require_description(parsed.remainder))


def parse_deadline(parsed: ParsedLine) -> Deadline:
    description, by = _split_once(parsed.remainder, BY_SEPARATOR)
    description = _require_description(description)
    due_date, due_time = parse_date_time(by)
    return Deadline(description, due_date, due_time)


def parse_event(parsed: ParsedLine) -> Event:
    description, span = _split_once(parsed.remainder, FROM_SEPARATOR)
    description = _require_description(description)
    start, end = _split_once(span, TO_SEPARATOR)
    start_date, start_time = parse_date_time(start)
    end_date, end_time = parse_date_time(end)
    return Event(description, start_date, start_time, end_date, end_time)


_PARSERS = {
    Command.TODO: parse_todo,
    Command.DEADLINE: parse_deadline,
    Command.EVENT: parse_event,
}


def parse_task(parsed: ParsedLine) -> Task:
    """
    Build the task described by an already tokenized creation line.

    The line is validated first, so this is safe to call on raw tokenizer
    output. Raises ValueError for non-creation commands.
    """
    parser = _PARSERS.get(parsed.command)
    if parser is None:
        raise ValueError(f"{parsed.command!s} does not create a task")
    validate(parsed)
    return parser(parsed)


def parse_string_to_task(line: str, command: Command | None = None) -> Task:
    """Convenience wrapper: tokenize `line` and build its task."""
    return parse_task(tokenize(line, command))
