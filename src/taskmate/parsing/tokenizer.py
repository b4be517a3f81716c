# src/taskmate/parsing/tokenizer.py

"""
Line tokenizer and shape validator.

A line is split on single spaces. The first token picks the Command; the
rest are checked against the per-command token counts below before any
parsing or list access happens. Separators and thresholds live here only,
and the task parser imports them from this module.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .commands import Command
from .errors import (
    IndexNotNumericError,
    InvalidDescriptionError,
    InvalidKeywordCountError,
    InvalidTaskIndexError,
    MissingArgumentError,
)

TOKEN_SEPARATOR = " "
BY_SEPARATOR = " /by "
FROM_SEPARATOR = " /from "
TO_SEPARATOR = " /to "

# ASCII digits only; a leading minus still reaches the bounds check.
INDEX_RE = re.compile(r"-?[0-9]+")

# Minimum token counts (keyword included) for creation commands.
MIN_TOKENS: dict[Command, int] = {
    Command.TODO: 2,  # todo <description>
    Command.DEADLINE: 4,  # deadline <description> /by <date> [<time>]
    Command.EVENT: 5,  # event <description> /from <when> /to <when>
}

# Exact token counts for commands taking a single argument.
EXACT_TOKENS: dict[Command, int] = {
    Command.MARK: 2,
    Command.UNMARK: 2,
    Command.DELETE: 2,
    Command.FIND: 2,
}


@dataclass(frozen=True, slots=True)
class ParsedLine:
    """A raw line split into its command and tokens."""

    line: str
    command: Command
    tokens: tuple[str, ...]

    @property
    def keyword(self) -> str:
        return self.tokens[0]

    @property
    def args(self) -> tuple[str, ...]:
        return self.tokens[1:]

    @property
    def remainder(self) -> str:
        """Everything after the keyword and its separating space, verbatim."""
        return self.line.partition(TOKEN_SEPARATOR)[2]


def tokenize(line: str, command: Command | None = None) -> ParsedLine:
    """
    Split `line` into tokens and resolve its command.

    Surrounding whitespace (including the trailing newline) is dropped; inner
    spacing is kept so descriptions stay verbatim. Pass `command` to skip the
    keyword lookup when the caller already resolved it.
    """
    text = line.strip()
    tokens = tuple(text.split(TOKEN_SEPARATOR))
    if command is None:
        command = Command.from_keyword(tokens[0])
    return ParsedLine(line=text, command=command, tokens=tokens)


def validate(parsed: ParsedLine) -> None:
    """
    Check token counts for the parsed command.

    Raises:
        InvalidDescriptionError: creation command with no description.
        MissingArgumentError: too few tokens (or the wrong count for index
            commands).
        InvalidKeywordCountError: `find` without exactly one search word.
    """
    command = parsed.command
    count = len(parsed.tokens)

    if command in MIN_TOKENS:
        if count < 2 or not parsed.remainder.strip():
            raise InvalidDescriptionError()
        if count < MIN_TOKENS[command]:
            raise MissingArgumentError(
                f"Not enough details for '{command}'. {usage(command)}"
            )
        return

    if command is Command.FIND:
        if count != EXACT_TOKENS[command]:
            raise InvalidKeywordCountError()
        if any(c.isspace() for c in parsed.args[0]):
            raise InvalidKeywordCountError()
        return

    if command in EXACT_TOKENS and count != EXACT_TOKENS[command]:
        raise MissingArgumentError(f"Task number missing. {usage(command)}")


def parse_index(parsed: ParsedLine) -> int:
    """Return the 1-based task number typed after an index command."""
    raw = parsed.args[0]
    if not INDEX_RE.fullmatch(raw):
        raise IndexNotNumericError(f"'{raw}' is not a task number.")
    return int(raw)


def to_internal_index(user_index: int, size: int) -> int:
    """Convert a 1-based user index to a 0-based one, checking bounds."""
    if user_index < 1 or user_index > size:
        raise InvalidTaskIndexError(
            f"Task {user_index} does not exist (you have {size} task(s))."
        )
    return user_index - 1


USAGE: dict[Command, str] = {
    Command.LIST: "list",
    Command.MARK: "mark <task number>",
    Command.UNMARK: "unmark <task number>",
    Command.TODO: "todo <description>",
    Command.DEADLINE: "deadline <description> /by <YYYY-MM-DD> <HH:MM>",
    Command.EVENT: (
        "event <description> /from <YYYY-MM-DD> <HH:MM> /to <YYYY-MM-DD> <HH:MM>"
    ),
    Command.DELETE: "delete <task number>",
    Command.FIND: "find <keyword>",
    Command.BYE: "bye",
}


def usage(command: Command) -> str:
    return f"Usage: {USAGE[command]}" if command in USAGE else ""
