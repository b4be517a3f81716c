# tests/test_console_connector.py

from __future__ import annotations

import builtins
from collections.abc import Iterable

import pytest

from taskmate.connectors.console_connector import run_console_loop
from taskmate.core.state import AppState
from taskmate.tasks.task_list import TaskList

from .fakes import BrokenTaskRepo


def _feed(monkeypatch: pytest.MonkeyPatch, lines: Iterable[str]) -> None:
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_session_saves_after_each_mutation(state, repo, monkeypatch, capsys) -> None:
    _feed(
        monkeypatch,
        ["todo read book", "", "list", "mark 1", "find book", "bye", "todo never"],
    )

    run_console_loop(state)
    out = capsys.readouterr().out

    assert "Hello! I'm taskmate-test." in out
    assert "Got it. I've added this task:\n  [T][ ] read book\nNow you have 1 task in the list." in out
    assert "1. [T][ ] read book" in out
    assert "Nice! I've marked this task as done:\n  [T][X] read book" in out
    assert "Here are the matching tasks in your list:\n1. [T][X] read book" in out
    assert "Bye. Hope to see you again soon!" in out

    # two mutations (todo, mark); list/find/bye do not save; input after bye is never read
    assert len(repo.saves) == 2
    assert state.tasks.get_size() == 1


def test_errors_are_reported_and_loop_continues(state, repo, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["blah", "mark 3", "todo", "todo ok"])

    run_console_loop(state)
    out = capsys.readouterr().out

    assert "OOPS!!! Unknown command: 'blah'." in out
    assert "OOPS!!! Task 3 does not exist (you have 0 task(s))." in out
    assert "OOPS!!! The description of a task cannot be empty." in out
    assert [t.description for t in state.tasks] == ["ok"]
    assert len(repo.saves) == 1


def test_storage_failure_keeps_change_in_memory(settings, monkeypatch, capsys) -> None:
    state = AppState(settings=settings, store=BrokenTaskRepo(), tasks=TaskList())
    _feed(monkeypatch, ["todo a"])

    run_console_loop(state)
    out = capsys.readouterr().out

    assert "[WARN] disk is read-only. Your change is kept in memory only." in out
    assert state.tasks.get_size() == 1


def test_file_backed_session_persists_across_runs(file_state, settings, monkeypatch) -> None:
    _feed(monkeypatch, ["deadline submit report /by 2024-12-01 1800", "mark 1", "bye"])
    run_console_loop(file_state)

    assert settings.tasks_path.read_text("utf-8") == "D | 1 | submit report | 2024-12-01 | 18:00\n"

    from taskmate.cli.bootstrap import create_initial_state

    again = create_initial_state(settings=settings)
    assert again.tasks.tasks == file_state.tasks.tasks


def test_keyboard_interrupt_ends_loop(state, monkeypatch) -> None:
    def interrupt(prompt: str = "") -> str:
        raise KeyboardInterrupt

    monkeypatch.setattr(builtins, "input", interrupt)
    run_console_loop(state)
    assert state.tasks.get_size() == 0
