# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the argument specifications registered on an `ArgumentParser`.

There are exactly two kinds of specification:

- `PositionalArgument`: bound by its position among the tokens that no option
  consumed. Identified on the command line only through the usage text.
- `OptionalArgument`: bound by recognizing one of its directives (`-v`,
  `--verbose`, ...) among the input tokens.

Both expose the same capabilities through the `Argument` base class:
`name`, `kind`, `nargs`, `help`, `matches(token)`, `format()` (usage fragment)
and `explain()` (help entry).

Arity:
- `0`: presence-only switch (optional, BOOL kind only)
- `N >= 1`: exactly N values
- `VARIABLE` (`"..."`): as many values as are available

Help entries break descriptions every `HELP_WIDTH - HELP_INDENT` characters,
indenting each line by `HELP_INDENT` columns.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from argwise.value_kind import ValueKind

VARIABLE = "..."
HELP_WIDTH = 80
HELP_INDENT = 8


def wrap_help(text: str, width: int = HELP_WIDTH, indent: int = HELP_INDENT) -> list[str]:
    """Break `text` into indented lines of at most `width` columns."""
    step = width - indent
    return [" " * indent + text[i : i + step] for i in range(0, len(text), step)]


@dataclass
class Argument(ABC):
    """
    Shared contract of positional and optional specifications.

    Attributes:
        name (str): Key used to look up bound values.
        kind (ValueKind): Kind every bound value is converted to.
        nargs (int | str): Number of values consumed, or `VARIABLE`.
        help (str): Human-readable description.
    """

    name: str
    kind: ValueKind = ValueKind.STRING
    nargs: int | str = 1
    help: str = ""

    @property
    def is_variable(self) -> bool:
        return self.nargs == VARIABLE

    def describe_type(self) -> str:
        """Return the short type name shown in help text."""
        return self.kind.describe()

    def get_metavar_text(self) -> str:
        """Return the value placeholders shown after the argument in usage."""
        if self.is_variable:
            return f"{self.name}..."
        assert isinstance(self.nargs, int)
        if self.nargs > 1:
            return " ".join(f"{self.name}({i})" for i in range(self.nargs))
        elif self.nargs == 1:
            return self.name
        return ""

    def explain(self) -> str:
        """Return the help entry: a header line followed by the wrapped description."""
        lines = [f"  {self.get_header_text()}:"]
        if self.help:
            lines.extend(wrap_help(self.help))
        return "\n".join(lines)

    @abstractmethod
    def matches(self, token: str) -> bool:
        """Return True if `token` identifies this argument on the command line."""

    @abstractmethod
    def format(self) -> str:
        """Return the usage fragment for this argument."""

    @abstractmethod
    def get_header_text(self) -> str:
        """Return the first line of the help entry (without indent and colon)."""


@dataclass
class PositionalArgument(Argument):
    """An argument bound by position."""

    def matches(self, token: str) -> bool:
        return token == self.name

    def format(self) -> str:
        return self.get_metavar_text()

    def get_header_text(self) -> str:
        kinds = [self.describe_type()]
        if self.is_variable:
            kinds.append("...")
        else:
            assert isinstance(self.nargs, int)
            kinds.extend(self.describe_type() for _ in range(1, self.nargs))
        return f"{self.name} [{','.join(kinds)}]"


@dataclass
class OptionalArgument(Argument):
    """
    An argument bound by one of its directives.

    Attributes:
        directives (tuple[str, ...]): Command-line aliases, e.g. `("-v", "--verbose")`.
    """

    directives: tuple[str, ...] = ()

    @property
    def is_flag(self) -> bool:
        return self.nargs == 0

    def matches(self, token: str) -> bool:
        return token in self.directives

    def get_directive_text(self) -> str:
        return "|".join(self.directives)

    def format(self) -> str:
        directives = self.get_directive_text()
        if len(self.directives) > 1:
            directives = f"{{{directives}}}"
        metavar = self.get_metavar_text()
        if metavar:
            return f"[{directives} {metavar}]"
        return f"[{directives}]"

    def get_header_text(self) -> str:
        directives = self.get_directive_text()
        if self.is_flag:
            return directives
        kind = self.describe_type()
        if self.is_variable:
            return f"{directives} [{self.name}:{kind},...]"
        assert isinstance(self.nargs, int)
        if self.nargs == 1:
            return f"{directives} [{self.name}:{kind}]"
        fields = ",".join(f"{self.name}({i}):{kind}" for i in range(self.nargs))
        return f"{directives} [{fields}]"
