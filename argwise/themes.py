# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color palette and Rich theme used by Argwise consoles.

Style names are referenced in markup by the help, error and status renderers:
`usage`, `heading`, `error`, `status`.
"""
from rich.theme import Theme


class NordColors:
    """Subset of the Nord palette used by the default theme."""

    SNOW_STORM = "#ECEFF4"
    FROST_CYAN = "#88C0D0"
    AURORA_RED = "#BF616A"
    AURORA_YELLOW = "#EBCB8B"


def get_nord_theme() -> Theme:
    """Return the Rich theme used by the default consoles."""
    return Theme(
        {
            "usage": f"bold {NordColors.FROST_CYAN}",
            "heading": f"bold {NordColors.SNOW_STORM}",
            "error": f"bold {NordColors.AURORA_RED}",
            "status": NordColors.AURORA_YELLOW,
        }
    )
