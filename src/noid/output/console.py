"""Rich Console factory and theme for noid output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

NOID_THEME = Theme(
    {
        "noid.ok": "bold green",
        "noid.error": "bold red",
        "noid.op": "bold cyan",
        "noid.key": "dim",
        "noid.id": "bold blue",
        "noid.valid": "green",
        "noid.invalid": "red",
        "noid.number": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=NOID_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    if not isinstance(console.file, StringIO):
        raise TypeError(f"Console is not StringIO-backed: {type(console.file).__name__}")
    return console.file.getvalue()
