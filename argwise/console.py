# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for Argwise output (help on stdout, errors on stderr)."""
from rich.console import Console

from argwise.themes import get_nord_theme

console = Console(theme=get_nord_theme())
error_console = Console(stderr=True, theme=get_nord_theme())
