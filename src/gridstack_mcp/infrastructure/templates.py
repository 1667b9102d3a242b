"""Shared Jinja2 template loading with a configurable override directory."""

from __future__ import annotations

from pathlib import Path

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
)


def build_template_environment(group: str, *, override_dir: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    Overrides are searched in ``override_dir/<group>/`` and then in
    ``override_dir`` itself, so a flat directory of replacement templates
    works as well as a namespaced one.
    """

    loaders: list[BaseLoader] = []
    if override_dir is not None:
        loaders.append(FileSystemLoader([str(override_dir / group), str(override_dir)]))

    loaders.append(PackageLoader("gridstack_mcp", f"templates/{group}"))
    return Environment(
        loader=ChoiceLoader(loaders),
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
