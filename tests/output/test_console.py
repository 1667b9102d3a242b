"""Tests for the Rich console factory and theme."""

from __future__ import annotations

import pytest

from gridstack_mcp.domain.types import Category
from gridstack_mcp.output.console import GRID_THEME, create_console, get_output, style_for_category


def test_console_renders_to_buffer() -> None:
    console = create_console(no_color=True, width=80)
    console.print("hello [grid.ok]ok[/grid.ok]")
    assert get_output(console) == "hello ok\n"


def test_default_width() -> None:
    assert create_console().width == 120


@pytest.mark.parametrize("category", list(Category))
def test_every_category_is_themed(category: Category) -> None:
    style = style_for_category(category.value)
    assert style == f"grid.category.{category.value}"
    assert style in GRID_THEME.styles


def test_unknown_category_unstyled() -> None:
    assert style_for_category("plugins") == ""
