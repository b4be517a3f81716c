# src/taskmate/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from datetime import date, time
from pathlib import Path

from ..parsing.errors import StorageError, TaskmateError
from ..parsing.task_parser import parse_date, parse_time
from .task_list import TaskList
from .task_models import Deadline, Event, Task, TaskKind, ToDo

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = " | "
DONE_FLAGS = {"1": True, "0": False}

# Number of trailing date/time fields per variant.
_TRAILING_FIELDS = {
    TaskKind.TODO: 0,
    TaskKind.DEADLINE: 2,
    TaskKind.EVENT: 4,
}


def format_date(d: date) -> str:
    return d.isoformat()


def format_time(t: time) -> str:
    # Same strict forms the input parser accepts, so saved lines re-parse.
    return t.strftime("%H:%M:%S" if t.second else "%H:%M")


def encode_task(task: Task) -> str:
    """
    One storage line per task:

        T | 0 | read book
        D | 1 | submit report | 2024-12-01 | 18:00
        E | 0 | trip | 2024-01-01 | 09:00 | 2024-01-03 | 17:00
    """
    fields = [task.kind.value, "1" if task.is_done else "0", task.description]
    if isinstance(task, Deadline):
        fields += [format_date(task.due_date), format_time(task.due_time)]
    elif isinstance(task, Event):
        fields += [
            format_date(task.start_date),
            format_time(task.start_time),
            format_date(task.end_date),
            format_time(task.end_time),
        ]
    return FIELD_SEPARATOR.join(fields)


def decode_task(line: str) -> Task:
    """
    Inverse of encode_task.

    Tag and done flag are read from the left and date/time fields from the
    right, so the description may itself contain the field separator.
    Raises ValueError on malformed lines.
    """
    head = line.split(FIELD_SEPARATOR, 2)
    if len(head) != 3:
        raise ValueError(f"too few fields: {line!r}")
    raw_kind, raw_done, rest = head

    try:
        kind = TaskKind(raw_kind)
    except ValueError:
        raise ValueError(f"unknown task tag {raw_kind!r}") from None
    if raw_done not in DONE_FLAGS:
        raise ValueError(f"bad done flag {raw_done!r}")
    is_done = DONE_FLAGS[raw_done]

    n = _TRAILING_FIELDS[kind]
    parts = rest.rsplit(FIELD_SEPARATOR, n) if n else [rest]
    if len(parts) != n + 1:
        raise ValueError(f"expected {n} date/time fields: {line!r}")
    description, when = parts[0], parts[1:]
    if not description.strip():
        raise ValueError(f"empty description: {line!r}")

    try:
        if kind is TaskKind.DEADLINE:
            return Deadline(
                description, parse_date(when[0]), parse_time(when[1]), is_done=is_done
            )
        if kind is TaskKind.EVENT:
            return Event(
                description,
                parse_date(when[0]),
                parse_time(when[1]),
                parse_date(when[2]),
                parse_time(when[3]),
                is_done=is_done,
            )
    except TaskmateError as e:
        raise ValueError(str(e)) from e
    return ToDo(description, is_done=is_done)


class TaskFileStore:
    """
    Plain-text task store, one encoded task per line.

    Saves go through a temp file and os.replace so a crash mid-write never
    leaves a truncated list behind.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("TaskFileStore ready path=%s exists=%s", self._path, self._path.exists())

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskList:
        """Read the saved list; a missing file is an empty list."""
        if not self._path.exists():
            logger.info("No task file at %s, starting empty.", self._path)
            return TaskList()

        try:
            # newline="" keeps \r and other separators inside descriptions intact.
            with self._path.open("r", encoding="utf-8", newline="") as f:
                text = f.read()
        except OSError as e:
            logger.exception("Failed to read task file %s", self._path)
            raise StorageError(f"Could not read {self._path}: {e}") from e

        tasks: list[Task] = []
        skipped = 0
        for lineno, raw in enumerate(text.split("\n"), start=1):
            raw = raw.removesuffix("\r")
            if not raw.strip():
                continue
            try:
                tasks.append(decode_task(raw))
            except ValueError as e:
                skipped += 1
                logger.warning("Skipping corrupted line %d in %s: %s", lineno, self._path, e)

        logger.info("Loaded %d task(s) from %s (skipped=%d)", len(tasks), self._path, skipped)
        return TaskList(tasks)

    def save(self, tasks: Iterable[Task]) -> None:
        lines = [encode_task(t) for t in tasks]
        payload = "".join(f"{line}\n" for line in lines)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8", newline="") as f:
                f.write(payload)
            os.replace(tmp, self._path)
        except OSError as e:
            logger.exception("Failed to save tasks to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageError(f"Could not write {self._path}: {e}") from e
        logger.debug("Saved %d task(s) to %s", len(lines), self._path)
