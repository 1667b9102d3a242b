"""Rich Console factory and theme for gridstack-mcp output.

Consoles render into a StringIO buffer so ``format_result() -> str`` stays
the one output contract. Rich drops color codes when it sees no terminal
(tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GRID_THEME = Theme(
    {
        "grid.ok": "bold green",
        "grid.error": "bold red",
        "grid.op": "bold cyan",
        "grid.key": "dim",
        "grid.name": "bold blue",
        "grid.uri": "bold blue",
        "grid.mime": "dim",
        "grid.category.core": "green",
        "grid.category.widget": "blue",
        "grid.category.layout": "magenta",
        "grid.category.responsive": "cyan",
        "grid.category.batch": "bright_yellow",
        "grid.category.serialization": "yellow",
        "grid.category.state": "bright_blue",
        "grid.category.utility": "white",
        "grid.category.events": "bright_magenta",
        "grid.category.advanced": "red",
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
        theme=GRID_THEME,
        no_color=no_color,
        highlight=False,
        emoji=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_category(category: str) -> str:
    """Rich style for an operation category; unthemed categories get none."""
    style = f"grid.category.{category}"
    return style if style in GRID_THEME.styles else ""
