# tests/test_task_parser.py

from __future__ import annotations

from datetime import date, time

import pytest

from taskmate.parsing.commands import Command
from taskmate.parsing.errors import InvalidDateTimeError, InvalidDescriptionError
from taskmate.parsing.task_parser import (
    parse_date,
    parse_date_time,
    parse_string_to_task,
    parse_time,
)
from taskmate.tasks.task_models import Deadline, Event, ToDo


def test_todo_takes_whole_remainder() -> None:
    task = parse_string_to_task("todo read the  book")
    assert isinstance(task, ToDo)
    assert task.description == "read the  book"
    assert task.is_done is False


def test_todo_without_description() -> None:
    with pytest.raises(InvalidDescriptionError):
        parse_string_to_task("todo")


def test_deadline_scenario() -> None:
    task = parse_string_to_task("deadline submit report /by 2024-12-01 1800")
    assert task == Deadline("submit report", date(2024, 12, 1), time(18, 0))


def test_event_scenario() -> None:
    task = parse_string_to_task("event trip /from 2024-01-01 0900 /to 2024-01-03 1700")
    assert isinstance(task, Event)
    assert task.description == "trip"
    assert (task.start_date, task.start_time) == (date(2024, 1, 1), time(9, 0))
    assert (task.end_date, task.end_time) == (date(2024, 1, 3), time(17, 0))


def test_event_does_not_check_ordering() -> None:
    task = parse_string_to_task("event oops /from 2024-02-01 10:00 /to 2024-01-01 09:00")
    assert isinstance(task, Event)
    assert task.end_date < task.start_date


@pytest.mark.parametrize(
    "line",
    [
        "deadline report due 2024-12-01 1800",  # no /by
        "deadline report /by 2024-12-01",  # no time
        "deadline report /by 2024-12-01 18:00 extra",
        "deadline report /by 01-12-2024 1800",
        "deadline report /by 2024-02-30 1800",
        "deadline report /by 2024-12-01 2500",
        "deadline a /by 2024-12-01 1800 /by 2024-12-02 1800",
        "event trip from 2024-01-01 0900 to 2024-01-03 1700",
        "event trip /from 2024-01-01 0900 to 2024-01-03 1700",
        "event trip /from 2024-01-01 /to 2024-01-03 1700",
        "event trip /from 2024-01-01 0900 /to tomorrow 1700",
    ],
)
def test_bad_date_time_or_separator(line: str) -> None:
    with pytest.raises(InvalidDateTimeError):
        parse_string_to_task(line)


@pytest.mark.parametrize(
    "line",
    [
        "deadline /by 2024-12-01 1800",
        "deadline    /by 2024-12-01 1800",
        "event /from 2024-01-01 0900 /to 2024-01-03 1700",
    ],
)
def test_empty_description_before_separator(line: str) -> None:
    with pytest.raises(InvalidDescriptionError):
        parse_string_to_task(line)


def test_command_resolved_by_caller_is_used() -> None:
    task = parse_string_to_task("todo buy milk", Command.TODO)
    assert task == ToDo("buy milk")


def test_non_creation_command_is_rejected() -> None:
    with pytest.raises(ValueError):
        parse_string_to_task("list")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("18:00", time(18, 0)),
        ("1800", time(18, 0)),
        ("07:05:09", time(7, 5, 9)),
        ("0000", time(0, 0)),
    ],
)
def test_parse_time_forms(raw: str, expected: time) -> None:
    assert parse_time(raw) == expected


@pytest.mark.parametrize("raw", ["6pm", "18", "18:0", "180000", "1800:00", "24:00", "12:60"])
def test_parse_time_rejects(raw: str) -> None:
    with pytest.raises(InvalidDateTimeError):
        parse_time(raw)


@pytest.mark.parametrize("raw", ["2024-1-01", "20241201", "2024/12/01", "2023-02-29"])
def test_parse_date_is_strict(raw: str) -> None:
    with pytest.raises(InvalidDateTimeError):
        parse_date(raw)


def test_parse_date_time_round_trip_through_iso_text() -> None:
    d, t = parse_date_time("2024-12-01 18:00")
    assert parse_date_time(f"{d.isoformat()} {t.strftime('%H:%M')}") == (d, t)
