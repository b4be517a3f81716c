# src/taskmate/parsing/commands.py

from __future__ import annotations

from enum import StrEnum


class Command(StrEnum):
    """
    Closed set of command keywords.

    Keywords are matched case-sensitively against their lowercase spelling.
    Anything else resolves to INVALID; whether that is an error is decided at
    dispatch, not here.
    """

    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    DELETE = "delete"
    FIND = "find"
    BYE = "bye"
    INVALID = "invalid"

    @classmethod
    def from_keyword(cls, keyword: str) -> Command:
        try:
            return cls(keyword)
        except ValueError:
            return cls.INVALID

    @property
    def is_creation(self) -> bool:
        return self in CREATION_COMMANDS

    @property
    def is_index(self) -> bool:
        return self in INDEX_COMMANDS

    @property
    def mutates(self) -> bool:
        return self in CREATION_COMMANDS or self in INDEX_COMMANDS


CREATION_COMMANDS = frozenset({Command.TODO, Command.DEADLINE, Command.EVENT})
INDEX_COMMANDS = frozenset({Command.MARK, Command.UNMARK, Command.DELETE})
