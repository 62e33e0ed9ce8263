"""Plugin interface for neutree-catalog components.

This module defines the plugin base class and metadata that all plugins
use to integrate with the MCP server via pluggy hooks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from neutree_catalog.hooks import hookimpl

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from neutree_catalog.server import CatalogServer


@dataclass
class PluginMetadata:
    """Metadata describing a neutree-catalog plugin."""

    name: str
    """Unique plugin name, e.g., 'catalog', 'huggingface'."""

    version: str
    """Plugin version following semver, e.g., '1.0.0'."""

    description: str
    """Human-readable description of what this plugin provides."""

    maintainer: str
    """Maintainer email or team."""


class BasePlugin:
    """Base implementation of a plugin with default hook implementations.

    Example entry point in pyproject.toml for external plugins:
        [project.entry-points."neutree_catalog.plugins"]
        my_plugin = "my_package.plugin:MyPlugin"
    """

    def __init__(self, metadata: PluginMetadata) -> None:
        self._metadata = metadata

    @hookimpl
    def catalog_get_plugin_metadata(self) -> PluginMetadata:
        """Return plugin metadata."""
        return self._metadata

    @hookimpl
    def catalog_register_tools(self, mcp: FastMCP, server: CatalogServer) -> None:
        """Register MCP tools. Override in subclass."""
        pass

    @hookimpl
    def catalog_register_resources(self, mcp: FastMCP, server: CatalogServer) -> None:
        """Register MCP resources. Override in subclass."""
        pass

    @hookimpl
    def catalog_health_check(self, server: CatalogServer) -> tuple[bool, str]:  # noqa: ARG002
        """Plugins are healthy unless they say otherwise."""
        return True, "No health requirements"
