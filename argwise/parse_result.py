# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Outcome of matching a token list against a parser's specifications.

`ArgumentParser.parse_tokens()` returns a `ParseResult` instead of printing or
exiting; `ArgumentParser.parse()` decides what to do with it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from argwise.exceptions import ParseError
from argwise.typed_value import TypedValue


class ParseStatus(Enum):
    """How a parse attempt ended."""

    SUCCESS = "success"
    HELP_REQUESTED = "help_requested"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


@dataclass
class ParseResult:
    """
    Tagged result of a parse attempt.

    Attributes:
        status (ParseStatus): How the attempt ended.
        values (dict[str, list[TypedValue]]): Bound values. On failure, the
            values bound before the error.
        error (ParseError | None): The error, when `status` is FAILED.
        help_requested (bool): True if the help option was bound, even on failure.
    """

    status: ParseStatus
    values: dict[str, list[TypedValue]] = field(default_factory=dict)
    error: ParseError | None = None
    help_requested: bool = False

    @property
    def ok(self) -> bool:
        return self.status is not ParseStatus.FAILED
