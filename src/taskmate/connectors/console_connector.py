# src/taskmate/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import execute, registry as command_registry
from ..core.messages import GREETING, render_result
from ..core.state import AppState
from ..parsing.errors import StorageError, TaskmateError

logger = logging.getLogger(__name__)

PROMPT = ">>> You: "


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def run_console_loop(state: AppState) -> None:
    """
    Read-eval-print loop over stdin/stdout.

    Every mutating command is followed by a save. The loop ends on `bye`,
    EOF or Ctrl+C; errors from a single line never end it.
    """
    settings = getattr(state, "settings", None)
    app_name = str(getattr(settings, "app_name", "taskmate"))
    show_ts = bool(getattr(settings, "timestamps", True))

    def say(text: str) -> None:
        if show_ts:
            print(f"[{_ts_local()}] {text}", flush=True)
        else:
            print(text, flush=True)

    logger.info("Console connector started (tasks=%d).", len(state.tasks))
    say(GREETING.format(app_name=app_name))
    say(command_registry.build_help())

    while True:
        try:
            user_input = input(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        try:
            result = execute(state, user_input)
        except TaskmateError as e:
            logger.debug("Command rejected (%s): %r", type(e).__name__, user_input)
            say(f"OOPS!!! {e}")
            continue
        except Exception:
            logger.exception("Command handler crashed.")
            say("Internal error while handling a command.")
            continue

        if result.mutated:
            try:
                state.persist()
            except StorageError as e:
                say(f"[WARN] {e} Your change is kept in memory only.")

        say(render_result(result, state.tasks.tasks))

        if result.should_exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
