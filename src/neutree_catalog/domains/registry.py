"""Plugin registry for the built-in domains."""

from __future__ import annotations

from typing import TYPE_CHECKING

from neutree_catalog.hooks import hookimpl
from neutree_catalog.plugin import BasePlugin, PluginMetadata

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from neutree_catalog.server import CatalogServer


class HuggingFacePlugin(BasePlugin):
    """Plugin for converting hub repositories into catalog documents."""

    def __init__(self) -> None:
        super().__init__(
            PluginMetadata(
                name="huggingface",
                version="1.0.0",
                description="Convert Hugging Face model repos into ModelCatalog documents",
                maintainer="neutree-catalog maintainers",
            )
        )

    @hookimpl
    def catalog_register_tools(self, mcp: FastMCP, server: CatalogServer) -> None:
        from neutree_catalog.domains.huggingface.tools import register_tools

        register_tools(mcp, server)

    @hookimpl
    def catalog_health_check(self, server: CatalogServer) -> tuple[bool, str]:  # noqa: ARG002
        return True, "Hub requests are made on demand"


class CatalogPlugin(BasePlugin):
    """Plugin for browsing and exporting the catalog directory."""

    def __init__(self) -> None:
        super().__init__(
            PluginMetadata(
                name="catalog",
                version="1.0.0",
                description="Search, filter and export ModelCatalog documents",
                maintainer="neutree-catalog maintainers",
            )
        )

    @hookimpl
    def catalog_register_tools(self, mcp: FastMCP, server: CatalogServer) -> None:
        from neutree_catalog.domains.catalog.tools import register_tools

        register_tools(mcp, server)

    @hookimpl
    def catalog_register_resources(self, mcp: FastMCP, server: CatalogServer) -> None:
        from neutree_catalog.domains.catalog.tools import register_resources

        register_resources(mcp, server)

    @hookimpl
    def catalog_health_check(self, server: CatalogServer) -> tuple[bool, str]:
        catalog_dir = server.config.catalog_dir
        if not catalog_dir.is_dir():
            return False, f"Catalog directory not found: {catalog_dir}"
        return True, f"Catalog directory {catalog_dir} available"


def get_core_plugins() -> list[BasePlugin]:
    """Return all built-in domain plugin instances."""
    return [
        HuggingFacePlugin(),
        CatalogPlugin(),
    ]
