# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentParser`, a small typed argument parser for
flat command-line interfaces.

The host program declares positional arguments and optional switches, each
with a `ValueKind`, then calls `parse()`. Tokens are matched in two phases
(see `argwise.matching`): options first, over the whole input, then the
leftover tokens against positional arguments in declaration order. Bound
values are stored as `TypedValue` lists and converted on read.

Key Features:
- Typed values (`bool`, `int`, `float`, `str`) validated while parsing
- Fixed and variable (`...`) arity for both positionals and options
- Multiple directives per option (`-v`, `--verbose`)
- Built-in `-h`/`--help` option
- Rich-rendered usage, help and status output

Public Interface:
- `add_argument(...)`: Register a positional argument.
- `add_option(...)`: Register an optional argument.
- `parse_tokens(...)`: Match tokens and return a `ParseResult` (no side effects).
- `parse(...)`: Match tokens, printing help/errors and exiting as configured.
- `get(...)`, `getall(...)`, `has(...)`: Query bound values.
- `render_help()`, `display_status()`: Print help and a parse status dump.

Example Usage:
    parser = ArgumentParser(["report", "--count", "5", "out.txt"])
    parser.add_option(["-c", "--count"], "count", ValueKind.INTEGER, 1)
    parser.add_argument("file", ValueKind.STRING)
    parser.parse()

    parser.get("count")  # 5
    parser.get("file")   # "out.txt"

Design Notes:
Short-option bundling (`-abc`), `--opt=value`, sub-commands and environment
fallbacks are intentionally not supported. Tokens left over after every
positional is bound are reported as an error.
"""
from __future__ import annotations

import sys
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from rich.console import Console
from rich.markup import escape

from argwise.argument import VARIABLE, Argument, OptionalArgument, PositionalArgument
from argwise.console import console, error_console
from argwise.exceptions import (
    ArgwiseError,
    NotFoundError,
    ParseError,
    ParserNotReadyError,
    RegistrationError,
    TooManyArgumentsError,
)
from argwise.logger import logger
from argwise.matching import bind_positionals, find_option, scan_options
from argwise.parse_result import ParseResult, ParseStatus
from argwise.typed_value import TypedValue
from argwise.utils import get_program_name
from argwise.value_kind import ValueKind

HELP_NAME = "help"
HELP_DIRECTIVES = ("-h", "--help")


class _Missing:
    """Marker for a `default` that was not supplied."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class ArgumentParser:
    """
    Typed command-line argument parser.

    Features:
    - Positional arguments bound in declaration order.
    - Optional arguments bound by directive, anywhere in the input.
    - Presence-only boolean switches.
    - Variable-arity arguments.
    - Errors reported with usage text and an exit status, or re-raised.
    - Help and usage rendered with Rich.
    """

    def __init__(
        self,
        argv: Sequence[str] | None = None,
        description: str = "",
        add_help: bool = True,
        program: str | None = None,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        """
        Initialize the ArgumentParser.

        Args:
            argv (Sequence[str] | None): Program name followed by the tokens to
                parse. Defaults to `sys.argv`.
            description (str): Text shown above the usage line in help output.
            add_help (bool): Register the `-h`/`--help` option.
            program (str | None): Program name override for usage text.
            console (Console | None): Console used for help and status output.
            error_console (Console | None): Console used for error output.
        """
        if argv is None:
            argv = sys.argv
        argv = list(argv)
        self.program: str = program or (get_program_name(argv[0]) if argv else "")
        self.description: str = description
        self.add_help: bool = add_help
        self._console: Console | None = console
        self._error_console: Console | None = error_console
        self._tokens: list[str] = argv[1:]
        self._positional: list[PositionalArgument] = []
        self._optional: list[OptionalArgument] = []
        self._name_set: set[str] = set()
        self._values: dict[str, list[TypedValue]] = {}
        self._completed: bool = False
        if add_help:
            self._add_help()

    @property
    def console(self) -> Console:
        return self._console or console

    @property
    def error_console(self) -> Console:
        return self._error_console or error_console

    def _add_help(self) -> None:
        """Add help option to the parser."""
        self._register(
            OptionalArgument(
                name=HELP_NAME,
                kind=ValueKind.BOOL,
                nargs=0,
                help="Show a help message",
                directives=HELP_DIRECTIVES,
            )
        )

    def set_description(self, description: str) -> None:
        self.description = description

    @property
    def tokens(self) -> tuple[str, ...]:
        """The raw tokens to parse (argv without the program name)."""
        return tuple(self._tokens)

    @property
    def positional(self) -> tuple[PositionalArgument, ...]:
        return tuple(self._positional)

    @property
    def optional(self) -> tuple[OptionalArgument, ...]:
        return tuple(self._optional)

    @property
    def completed(self) -> bool:
        """True once a parse has finished (successfully, or with help on error)."""
        return self._completed

    def _validate_name(self, name: str) -> str:
        if not isinstance(name, str) or not name.strip():
            raise RegistrationError("Argument name must be a non-empty string")
        if name == HELP_NAME:
            raise RegistrationError(f"The name '{HELP_NAME}' is reserved")
        if name in self._name_set:
            raise RegistrationError(f"An argument named '{name}' is already defined")
        return name

    def _validate_kind(self, kind: ValueKind | str | type) -> ValueKind:
        try:
            return ValueKind(kind)
        except ValueError as error:
            raise RegistrationError(str(error)) from error

    def _validate_nargs(self, nargs: Any, positional: bool) -> int | str:
        if nargs is Ellipsis or nargs in (VARIABLE, "*"):
            return VARIABLE
        if isinstance(nargs, bool) or not isinstance(nargs, int):
            raise RegistrationError(
                f"nargs must be a non-negative integer or '{VARIABLE}', got {nargs!r}"
            )
        if nargs < 0:
            raise RegistrationError(f"nargs must not be negative, got {nargs}")
        if nargs == 0 and positional:
            raise RegistrationError("Positional arguments must take at least one value")
        return nargs

    def _normalize_directives(self, directives: str | Sequence[str]) -> tuple[str, ...]:
        if isinstance(directives, str):
            directives = (directives,)
        try:
            normalized = tuple(directives)
        except TypeError:
            raise RegistrationError(
                "directives must be a string or a sequence of strings"
            ) from None
        if not normalized:
            raise RegistrationError("An option needs at least one directive")
        for directive in normalized:
            if not isinstance(directive, str) or not directive:
                raise RegistrationError(f"Invalid directive {directive!r}")
        return normalized

    def _register(self, argument: Argument) -> None:
        self._name_set.add(argument.name)
        if isinstance(argument, PositionalArgument):
            self._positional.append(argument)
        else:
            assert isinstance(argument, OptionalArgument)
            for directive in argument.directives:
                existing = find_option(directive, self._optional)
                if existing is not None:
                    logger.debug(
                        "Directive '%s' of '%s' is shadowed by '%s'",
                        directive,
                        argument.name,
                        existing.name,
                    )
            self._optional.append(argument)
        self._completed = False
        logger.debug("Registered %r", argument)

    def add_argument(
        self,
        name: str,
        kind: ValueKind | str | type = ValueKind.STRING,
        nargs: int | str = 1,
        help: str = "",
    ) -> PositionalArgument:
        """
        Register a positional argument.

        Args:
            name (str): Name used to look up the bound values.
            kind (ValueKind | str | type): Kind of the values.
            nargs (int | str): Number of values (>= 1), or `VARIABLE` to take
                every remaining token. A variable positional must be the last one.
            help (str): Description shown in help output.

        Returns:
            PositionalArgument: The registered specification.

        Raises:
            RegistrationError: If the name is reserved or taken, the arity is
                invalid, or a variable positional is already registered.
        """
        if any(argument.is_variable for argument in self._positional):
            raise RegistrationError(
                f"Cannot add argument '{name}' after a variable-length argument"
            )
        argument = PositionalArgument(
            name=self._validate_name(name),
            kind=self._validate_kind(kind),
            nargs=self._validate_nargs(nargs, positional=True),
            help=help,
        )
        self._register(argument)
        return argument

    def add_option(
        self,
        directives: str | Sequence[str],
        name: str,
        kind: ValueKind | str | type = ValueKind.BOOL,
        nargs: int | str = 0,
        help: str = "",
    ) -> OptionalArgument:
        """
        Register an optional argument.

        Args:
            directives (str | Sequence[str]): Directive(s) identifying the
                option, e.g. `["-v", "--verbose"]`.
            name (str): Name used to look up the bound values.
            kind (ValueKind | str | type): Kind of the values.
            nargs (int | str): Number of values following the directive.
                `0` makes a presence-only BOOL switch; `VARIABLE` takes tokens
                up to the next directive.
            help (str): Description shown in help output.

        Returns:
            OptionalArgument: The registered specification.

        Raises:
            RegistrationError: If the name is reserved or taken, no directive
                is given, or the arity is invalid for the kind.
        """
        name = self._validate_name(name)
        kind = self._validate_kind(kind)
        nargs = self._validate_nargs(nargs, positional=False)
        if nargs == 0 and kind is not ValueKind.BOOL:
            raise RegistrationError(
                f"Option '{name}' takes no values, so its kind must be {ValueKind.BOOL}"
            )
        argument = OptionalArgument(
            name=name,
            kind=kind,
            nargs=nargs,
            help=help,
            directives=self._normalize_directives(directives),
        )
        self._register(argument)
        return argument

    def get_argument(self, name: str) -> Argument | None:
        """Return the specification registered under `name`, if any."""
        arguments: list[Argument] = [*self._positional, *self._optional]
        return next((argument for argument in arguments if argument.name == name), None)

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert argument metadata into a serializable list of dicts.

        The help option is left out, so the result can be fed back to
        `argwise.config` declaration files.
        """
        definitions: list[dict[str, Any]] = []
        for argument in self._positional:
            definitions.append(
                {
                    "name": argument.name,
                    "kind": argument.kind.value,
                    "nargs": argument.nargs,
                    "help": argument.help,
                }
            )
        for option in self._optional:
            if option.name == HELP_NAME:
                continue
            definitions.append(
                {
                    "directives": list(option.directives),
                    "name": option.name,
                    "kind": option.kind.value,
                    "nargs": option.nargs,
                    "help": option.help,
                }
            )
        return definitions

    def _is_help_bound(self, values: Mapping[str, list[TypedValue]]) -> bool:
        if not self.add_help:
            return False
        bound = values.get(HELP_NAME)
        return bool(bound) and bound[0].read(bool)

    def parse_tokens(self, tokens: Sequence[str] | None = None) -> ParseResult:
        """
        Match tokens against the registered specifications.

        Nothing is printed and parser state is left untouched.

        Args:
            tokens (Sequence[str] | None): Tokens to match. Defaults to the
                tokens given at construction.

        Returns:
            ParseResult: SUCCESS or HELP_REQUESTED with every value bound, or
                FAILED with the error and the values bound before it.
        """
        if tokens is None:
            tokens = self._tokens
        option_values: dict[str, list[TypedValue]] = {}
        try:
            option_values, remaining = scan_options(tokens, self._optional)
            positional_values, leftover = bind_positionals(remaining, self._positional)
            if leftover:
                plural = "s" if len(leftover) > 1 else ""
                raise TooManyArgumentsError(
                    f"Unexpected argument{plural}: {', '.join(leftover)}"
                )
        except ParseError as error:
            values = {**option_values, **error.bound}
            logger.debug("Parsing %s failed: %s", list(tokens), error)
            return ParseResult(
                status=ParseStatus.FAILED,
                values=values,
                error=error,
                help_requested=self._is_help_bound(values),
            )
        values = {**option_values, **positional_values}
        help_requested = self._is_help_bound(values)
        return ParseResult(
            status=ParseStatus.HELP_REQUESTED if help_requested else ParseStatus.SUCCESS,
            values=values,
            help_requested=help_requested,
        )

    def parse(
        self,
        args: Sequence[str] | None = None,
        help_on_error: bool = True,
        show_help_and_exit: bool = True,
    ) -> ParseResult:
        """
        Parse the tokens and store the bound values.

        Args:
            args (Sequence[str] | None): Tokens replacing the ones given at
                construction.
            help_on_error (bool): On a parse error, print usage and the error
                to stderr and exit with status 1 (or print full help and exit
                with status 0 if help was requested). When False, the error is
                re-raised and the parser stays not ready.
            show_help_and_exit (bool): After a successful parse, print full
                help and exit with status 0 if help was requested.

        Returns:
            ParseResult: The outcome, when the process is not exited.

        Raises:
            ParseError: If parsing fails and `help_on_error` is False.
        """
        if args is not None:
            self._tokens = list(args)
        self._completed = False
        self._values = {}
        result = self.parse_tokens()
        if result.status is ParseStatus.FAILED:
            assert result.error is not None
            if not help_on_error:
                raise result.error
            self._values = result.values
            self._completed = True
            if result.help_requested:
                self.render_help()
                sys.exit(0)
            self.render_error(result.error)
            sys.exit(1)
        self._values = result.values
        self._completed = True
        if result.help_requested and show_help_and_exit:
            self.render_help()
            sys.exit(0)
        return result

    def _lookup(self, name: str) -> list[TypedValue]:
        if not self._completed:
            raise ParserNotReadyError("Arguments have not been parsed")
        if name not in self._values:
            raise NotFoundError(f"Argument '{name}' not found")
        return self._values[name]

    def get(self, name: str, type: type | None = None, default: Any = MISSING) -> Any:
        """
        Return the first value bound to `name`.

        Args:
            name (str): Argument name.
            type (type | None): `bool`, `int`, `float` or `str`. Defaults to
                the argument's native type.
            default (Any): Returned instead of raising when supplied.

        Raises:
            ParserNotReadyError: If no parse has completed.
            NotFoundError: If `name` has no bound values.
            ConversionError: If the value cannot be read as `type`.
        """
        try:
            values = self._lookup(name)
            if not values:
                raise NotFoundError(f"Argument '{name}' has no values")
            return values[0].read(type)
        except ArgwiseError:
            if default is MISSING:
                raise
            return default

    def getall(
        self, name: str, type: type | None = None, default: Any = MISSING
    ) -> list[Any]:
        """
        Return every value bound to `name`, in binding order.

        Raises the same errors as `get()`; `default` is returned as given when
        supplied and a lookup fails.
        """
        try:
            return [value.read(type) for value in self._lookup(name)]
        except ArgwiseError:
            if default is MISSING:
                raise
            return default

    def has(self, name: str) -> bool:
        """Return True if `name` currently has bound values."""
        return name in self._values

    @property
    def values(self) -> Mapping[str, tuple[TypedValue, ...]]:
        """Read-only snapshot of the bound values."""
        if not self._completed:
            raise ParserNotReadyError("Arguments have not been parsed")
        return MappingProxyType(
            {name: tuple(values) for name, values in self._values.items()}
        )

    def get_usage(self) -> str:
        """
        Return the usage line.

        Switches come first, then options with fixed arity, positional
        arguments, and options with variable arity last.
        """
        fragments = [self.program] if self.program else []
        fragments.extend(o.format() for o in self._optional if o.is_flag)
        fragments.extend(
            o.format() for o in self._optional if not o.is_flag and not o.is_variable
        )
        fragments.extend(p.format() for p in self._positional)
        fragments.extend(o.format() for o in self._optional if o.is_variable)
        return " ".join(fragments)

    def _help_sections(self, simple: bool = False) -> list[tuple[str, str]]:
        sections: list[tuple[str, str]] = []
        if self.description:
            sections.append(("", f"{self.description}\n"))
        sections.append(("usage", "usage:"))
        sections.append(("", f"  {self.get_usage()}"))
        if simple:
            return sections
        if self._positional:
            sections.append(("heading", "\nArguments"))
            sections.extend(("", p.explain()) for p in self._positional)
        if self._optional:
            sections.append(("heading", "\nOptions"))
            sections.extend(("", o.explain()) for o in self._optional)
        return sections

    def format_help(self, simple: bool = False) -> str:
        """Return the help text; `simple` stops after the usage line."""
        return "\n".join(text for _, text in self._help_sections(simple))

    def render_help(self, simple: bool = False, console: Console | None = None) -> None:
        """Print the help text using Rich output."""
        console = console or self.console
        for style, text in self._help_sections(simple):
            markup = f"[{style}]{escape(text)}[/{style}]" if style else escape(text)
            console.print(markup, soft_wrap=True, highlight=False, emoji=False)

    def render_error(self, error: ArgwiseError) -> None:
        """Print the abbreviated usage and `error` to the error console."""
        self.render_help(simple=True, console=self.error_console)
        self.error_console.print(
            f"\n[error]error:[/error] {escape(str(error))}",
            soft_wrap=True,
            highlight=False,
            emoji=False,
        )

    def format_status(self) -> str:
        """
        Return a diagnostic dump of the parser.

        Lists the input tokens, the defined options and positional arguments,
        and every bound value rendered for its kind.
        """
        lines = [
            " ".join(["# input arguments:", *self._tokens]),
            " ".join(["# defined options:", *(o.format() for o in self._optional)]),
            " ".join(["# named arguments:", *(p.format() for p in self._positional)]),
            "# parsed arguments:",
        ]
        for name in sorted(self._values):
            rendered = " ".join(value.render() for value in self._values[name])
            lines.append(f"    {name}: {rendered}".rstrip())
        return "\n".join(lines) + "\n"

    def display_status(self, console: Console | None = None) -> None:
        """Print the status dump using Rich output."""
        console = console or self.console
        console.print(
            f"[status]{escape(self.format_status())}[/status]",
            soft_wrap=True,
            highlight=False,
            emoji=False,
        )

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        directives = sum(len(o.directives) for o in self._optional)
        return (
            f"ArgumentParser(positional={len(self._positional)}, "
            f"optional={len(self._optional)}, directives={directives}, "
            f"completed={self._completed})"
        )

    def __repr__(self) -> str:
        return str(self)
