# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion and logging helpers for Argwise.

Coercion is a closed table: raw text can be converted to `bool`, `int`,
`float` or `str` and nothing else. Every failure is reported as a
`ConversionError` so callers never see a bare `ValueError`.

Functions:
- coerce_bool: Convert text to a boolean (`true`/`false` or integer truthiness).
- coerce_integer: Convert text to an integer.
- coerce_float: Convert text to a float.
- coerce_value: Convert text to any supported target type.
- get_program_name: Derive a display name from argv[0].
- setup_logging: Configure Rich or JSON logging for host programs.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Any, Callable

import pythonjsonlogger.json
from rich.logging import RichHandler

from argwise.console import error_console
from argwise.exceptions import ConversionError


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts `true`/`false` in any case, otherwise falls back to integer
    truthiness (`0` is False, any other integer is True).

    Args:
        value (str): The input string.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ConversionError: If the text is neither a boolean word nor an integer.
    """
    normalized = value.strip().lower()
    if normalized == "true":
        return True
    elif normalized == "false":
        return False
    try:
        return int(normalized) != 0
    except ValueError:
        raise ConversionError(
            f"Value '{value}' is not convertible to a boolean"
        ) from None


def coerce_integer(value: str, strict: bool = False) -> int:
    """
    Convert a string to an integer.

    Unless `strict`, a finite float literal is accepted and truncated toward
    zero (`"2.5"` reads as `2`).

    Raises:
        ConversionError: If the text is not an integer (or float) literal.
    """
    try:
        return int(value)
    except ValueError:
        if not strict:
            try:
                return int(float(value))
            except (ValueError, OverflowError):
                pass
    raise ConversionError(f"Value '{value}' is not convertible to an integer")


def coerce_float(value: str) -> float:
    """Convert a string to a float, raising `ConversionError` on failure."""
    try:
        return float(value)
    except ValueError:
        raise ConversionError(f"Value '{value}' is not convertible to a float") from None


_COERCERS: dict[type, Callable[[str], Any]] = {
    bool: coerce_bool,
    int: coerce_integer,
    float: coerce_float,
    str: str,
}


def coerce_value(value: str, target_type: type) -> Any:
    """
    Convert a string to the given target type.

    Args:
        value (str): The input string to convert.
        target_type (type): One of `bool`, `int`, `float` or `str`.

    Returns:
        Any: The coerced value.

    Raises:
        ConversionError: If the target type is unsupported or conversion fails.
    """
    try:
        coercer = _COERCERS[target_type]
    except (KeyError, TypeError):
        name = getattr(target_type, "__name__", repr(target_type))
        raise ConversionError(f"Cannot convert values to unsupported type '{name}'")
    return coercer(value)


def get_program_name(argv0: str) -> str:
    """Return the display name of a program from its argv[0]."""
    name = os.path.basename(argv0)
    if name == "__main__.py":
        package = os.path.basename(os.path.dirname(argv0))
        return f"python -m {package}" if package else f"python {argv0}"
    return name or argv0


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
            return (
                "docker" in content
                or "kubepods" in content
                or "containerd" in content
                or "podman" in content
            )
    except OSError:
        return False


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Configure root logging for a program that uses Argwise.

    Console records go to stderr so they never mix with help or status text.
    `mode` is "cli" (Rich) or "json"; when omitted, `ARGWISE_LOG_MODE` decides,
    then container detection. A file handler is added only for `log_filename`.
    """
    if not mode:
        mode = os.getenv("ARGWISE_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            console=error_console,
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(
                pythonjsonlogger.json.JsonFormatter(
                    "%(asctime)s %(name)s %(levelname)s %(message)s"
                )
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logger = logging.getLogger("argwise")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
