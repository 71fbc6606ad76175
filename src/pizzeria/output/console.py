"""Rich Console factory and theme for pizzeria output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PIZZERIA_THEME = Theme(
    {
        "pz.ok": "bold green",
        "pz.error": "bold red",
        "pz.warning": "bold yellow",
        "pz.op": "bold cyan",
        "pz.key": "dim",
        "pz.id": "bold blue",
        "pz.name": "bold",
        "pz.price": "magenta",
        "pz.status.pending": "yellow",
        "pz.status.preparing": "cyan",
        "pz.status.ready": "green",
        "pz.status.delivered": "dim green",
        "pz.status.cancelled": "red",
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
        theme=PIZZERIA_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Return the Rich style name for an order status."""
    name = f"pz.status.{status}"
    return name if name in PIZZERIA_THEME.styles else ""
