# src/taskmate/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the task file store into AppState and loads the saved list.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..parsing.errors import StorageError
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskFileStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings(). An unreadable task file
    is logged and the session starts with an empty list; the file itself is
    left alone until the first save.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskFileStore(settings.tasks_path)
    try:
        tasks = store.load()
    except StorageError:
        logger.warning("Starting with an empty task list; could not load %s", store.path)
        tasks = TaskList()

    return AppState(settings=settings, store=store, tasks=tasks)
