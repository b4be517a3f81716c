# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskmate.core.state import AppState
from taskmate.tasks.task_list import TaskList
from taskmate.tasks.task_store import TaskFileStore

from .fakes import InMemoryTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="taskmate-test",
        log_level="DEBUG",
        timestamps=False,
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.txt",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture()
def repo() -> InMemoryTaskRepo:
    return InMemoryTaskRepo()


@pytest.fixture()
def state(settings: SimpleNamespace, repo: InMemoryTaskRepo) -> AppState:
    """AppState backed by an in-memory repo (no disk I/O)."""
    return AppState(settings=settings, store=repo, tasks=TaskList())


@pytest.fixture()
def file_state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired with the real file store.

    The store's correctness is part of what the console tests check.
    """
    store = TaskFileStore(settings.tasks_path)
    return AppState(settings=settings, store=store, tasks=store.load())
