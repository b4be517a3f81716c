# src/taskmate/parsing/errors.py

"""
Error kinds raised by the command engine.

Every error is recoverable: the console loop renders `str(err)` to the user
and keeps reading. Each class carries a default message so call sites can
raise it bare.
"""

from __future__ import annotations


class TaskmateError(Exception):
    """Base class for all user-facing command errors."""

    default_message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidCommandKeywordError(TaskmateError):
    default_message = "Sorry, I don't know what that command means."


class MissingArgumentError(TaskmateError):
    default_message = "Some arguments are missing for this command."


class InvalidDescriptionError(TaskmateError):
    default_message = "The description of a task cannot be empty."


class InvalidDateTimeError(TaskmateError):
    default_message = "Invalid date/time. Use YYYY-MM-DD HH:MM (or HHMM)."


class InvalidTaskIndexError(TaskmateError):
    default_message = "There is no task with that number."


class IndexNotNumericError(TaskmateError):
    default_message = "The task number must be a whole number."


class InvalidKeywordCountError(TaskmateError):
    default_message = "Give exactly one word to search for."


class StorageError(TaskmateError):
    default_message = "Could not read or write the task file."
