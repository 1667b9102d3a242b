"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``gridstack-mcp.toml`` only
contains overrides. An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from gridstack_mcp import __version__
from gridstack_mcp.services.resources import DEFAULT_CDN_BASE

# --- gridstack-mcp.toml sections ---


class ServerConfig(BaseModel):
    """[server] section: identity reported during the MCP handshake."""

    model_config = {"frozen": True}

    name: str = "gridstack-mcp"
    version: str = __version__


class SynthesisConfig(BaseModel):
    """[synthesis] section."""

    model_config = {"frozen": True}

    json_indent: int = Field(default=2, ge=0, le=8)
    echo_parameters: bool = True


class ResourcesConfig(BaseModel):
    """[resources] section."""

    model_config = {"frozen": True}

    cdn_base: str = DEFAULT_CDN_BASE
    template_dir: Path | None = None


class GridConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    server: ServerConfig = Field(default_factory=ServerConfig)
    synthesis: SynthesisConfig = Field(default_factory=SynthesisConfig)
    resources: ResourcesConfig = Field(default_factory=ResourcesConfig)
