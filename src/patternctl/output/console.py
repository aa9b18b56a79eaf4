"""Rich Console factory and theme for patternctl output.

Consoles render into a StringIO buffer so renderers can return ``str``.
In non-TTY environments (tests, pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PATTERN_THEME = Theme(
    {
        "pat.ok": "bold green",
        "pat.error": "bold red",
        "pat.op": "bold cyan",
        "pat.key": "dim",
        "pat.class": "bold blue",
        "pat.handled": "green",
        "pat.unhandled": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=PATTERN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
