# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Two-phase matching of command-line tokens against argument specifications.

Both phases are plain functions over an input sequence: they never touch
parser state and return fresh mappings, so they can be exercised on their own.

Phase 1, `scan_options()`:
    Walk every token once, left to right. A token recognized as a directive of
    a registered option consumes that option's values (possibly swallowing
    tokens that would otherwise look positional); any other token is pushed to
    the remaining sequence.

Phase 2, `bind_positionals()`:
    Bind the remaining tokens to positional arguments in declaration order and
    return whatever is left over.

Errors raised here carry the values bound so far in `error.bound`, which lets
the caller decide whether help was requested before the failure.
"""
from __future__ import annotations

from collections import defaultdict
from typing import Sequence

from argwise.argument import OptionalArgument, PositionalArgument
from argwise.exceptions import InsufficientArgumentsError, ParseError
from argwise.logger import logger
from argwise.typed_value import TypedValue
from argwise.value_kind import ValueKind

Bound = dict[str, list[TypedValue]]


def find_option(token: str, options: Sequence[OptionalArgument]) -> OptionalArgument | None:
    """Return the first registered option whose directives include `token`."""
    return next((option for option in options if option.matches(token)), None)


def _convert(spec: OptionalArgument | PositionalArgument, raw: list[str]) -> list[TypedValue]:
    return [TypedValue(spec.kind, value) for value in raw]


def consume_option_values(
    tokens: Sequence[str],
    start: int,
    spec: OptionalArgument,
    options: Sequence[OptionalArgument],
) -> tuple[list[TypedValue], int]:
    """
    Consume the values of `spec`, whose directive sits just before `start`.

    Returns:
        tuple[list[TypedValue], int]: The converted values and the index of the
            first token not consumed.

    Raises:
        InsufficientArgumentsError: If fewer tokens remain than a fixed arity needs.
        ConversionError: If a value does not convert to the option's kind.
    """
    if spec.is_flag:
        return [TypedValue(ValueKind.BOOL, "true")], start
    if spec.is_variable:
        end = start
        while end < len(tokens) and find_option(tokens[end], options) is None:
            end += 1
        return _convert(spec, list(tokens[start:end])), end
    assert isinstance(spec.nargs, int)
    end = start + spec.nargs
    if end > len(tokens):
        raise InsufficientArgumentsError(
            f"Option '{tokens[start - 1]}' expects {spec.nargs} value(s) "
            f"for '{spec.name}', got {len(tokens) - start}"
        )
    return _convert(spec, list(tokens[start:end])), end


def scan_options(
    tokens: Sequence[str], options: Sequence[OptionalArgument]
) -> tuple[Bound, list[str]]:
    """
    Phase 1: bind option values and collect the tokens no option consumed.

    Args:
        tokens (Sequence[str]): Raw command-line tokens (without the program name).
        options (Sequence[OptionalArgument]): Options in registration order.

    Returns:
        tuple[Bound, list[str]]: Values bound per option name, and the
            remaining tokens in their original order.
    """
    bound: Bound = defaultdict(list)
    remaining: list[str] = []
    i = 0
    try:
        while i < len(tokens):
            token = tokens[i]
            spec = find_option(token, options)
            if spec is None:
                remaining.append(token)
                i += 1
                continue
            values, i = consume_option_values(tokens, i + 1, spec, options)
            logger.debug("Matched '%s' as '%s' with %d value(s)", token, spec.name, len(values))
            bound[spec.name].extend(values)
    except ParseError as error:
        error.bound = dict(bound)
        raise
    return dict(bound), remaining


def bind_positionals(
    tokens: Sequence[str], positionals: Sequence[PositionalArgument]
) -> tuple[Bound, list[str]]:
    """
    Phase 2: bind remaining tokens to positional arguments in order.

    Each positional needs at least one token; a `VARIABLE` positional (always
    the last one) takes every token left.

    Returns:
        tuple[Bound, list[str]]: Values bound per positional name, and the
            tokens that no positional consumed.

    Raises:
        InsufficientArgumentsError: If the tokens run out before every
            positional is bound.
        ConversionError: If a value does not convert to the positional's kind.
    """
    bound: Bound = {}
    i = 0
    try:
        for spec in positionals:
            if i >= len(tokens):
                raise InsufficientArgumentsError(f"Missing value for argument '{spec.name}'")
            if spec.is_variable:
                end = len(tokens)
            else:
                assert isinstance(spec.nargs, int)
                end = i + spec.nargs
                if end > len(tokens):
                    raise InsufficientArgumentsError(
                        f"Argument '{spec.name}' expects {spec.nargs} values, "
                        f"got {len(tokens) - i}"
                    )
            bound[spec.name] = _convert(spec, list(tokens[i:end]))
            i = end
    except ParseError as error:
        error.bound = dict(bound)
        raise
    return bound, list(tokens[i:])
