"""
Argwise

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Runs a parser built from a declaration file against the command line and
prints the status dump:

    $ ARGWISE_CONFIG=report.yaml python -m argwise --count 5 report.txt
"""

import logging
import os
import sys
from typing import Sequence

from rich.markup import escape

from argwise.config import find_config, loader
from argwise.console import error_console
from argwise.exceptions import ConfigError
from argwise.utils import setup_logging


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging(
        console_log_level=logging.DEBUG if os.getenv("ARGWISE_DEBUG") else logging.WARNING
    )
    config_path = find_config()
    if config_path is None:
        error_console.print(
            "[error]error:[/error] no declaration file found "
            "(argwise.yaml, argwise.yml, argwise.toml or $ARGWISE_CONFIG)",
            soft_wrap=True,
        )
        return 1
    try:
        parser = loader(config_path, sys.argv if argv is None else argv)
    except ConfigError as error:
        error_console.print(
            f"[error]error:[/error] {escape(str(error))}", soft_wrap=True, emoji=False
        )
        return 1
    parser.parse()
    parser.display_status()
    return 0


if __name__ == "__main__":
    sys.exit(main())
