"""Shared pytest fixtures and test helpers for gridstack-mcp tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from gridstack_mcp.catalog import default_catalog
from gridstack_mcp.domain.operations import OperationCatalog
from gridstack_mcp.services.dispatch import Dispatcher
from gridstack_mcp.services.resources import ResourceCatalog
from gridstack_mcp.services.telemetry import _current_span, disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def catalog() -> OperationCatalog:
    return default_catalog()


@pytest.fixture
def dispatcher(catalog: OperationCatalog) -> Dispatcher:
    return Dispatcher(catalog)


@pytest.fixture
def resource_catalog(catalog: OperationCatalog) -> ResourceCatalog:
    return ResourceCatalog(catalog)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stray gridstack-mcp.toml is found.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on CLI test classes.
    """
    monkeypatch.delenv("GRIDSTACK_MCP_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``-v`` CLI runs switch telemetry on for the whole context; undo that."""
    yield
    disable_telemetry()
    _current_span.set(None)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def run_ok(dispatcher: Dispatcher, name: str, **arguments: Any) -> str:
    """Invoke *name* via Dispatcher.execute, asserting success; returns the document."""
    result = dispatcher.execute(name, arguments)
    assert result.ok, result.error
    return result.data["text"]


def code_block(document: str) -> str:
    """The body of the ``Generated Code`` fence in a synthesized document."""
    marker = "### Generated Code:\n```javascript\n"
    start = document.index(marker) + len(marker)
    return document[start : document.index("\n```", start)]
