"""Pluggy hook specifications for neutree-catalog plugins.

Every domain, and any external package registered under the
``neutree_catalog.plugins`` entry point group, integrates with the MCP
server through these hooks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from neutree_catalog.plugin import PluginMetadata
    from neutree_catalog.server import CatalogServer

PROJECT_NAME = "neutree_catalog"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class CatalogMCPHookSpec:
    """Hooks a neutree-catalog plugin can implement."""

    @hookspec
    def catalog_get_plugin_metadata(self) -> PluginMetadata:  # type: ignore[empty-body]
        """Return metadata identifying the plugin."""

    @hookspec
    def catalog_register_tools(self, mcp: FastMCP, server: CatalogServer) -> None:
        """Register MCP tools with the server."""

    @hookspec
    def catalog_register_resources(self, mcp: FastMCP, server: CatalogServer) -> None:
        """Register MCP resources with the server."""

    @hookspec
    def catalog_health_check(self, server: CatalogServer) -> tuple[bool, str]:  # type: ignore[empty-body]
        """Report whether the plugin can serve requests, with a reason."""
