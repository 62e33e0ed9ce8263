"""FastMCP server for neutree-catalog with pluggy-based domain plugins."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from http import HTTPStatus
from typing import Any

from mcp.server.fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from neutree_catalog import __version__
from neutree_catalog.config import CatalogConfig, get_config
from neutree_catalog.domains.catalog.index import CatalogIndex
from neutree_catalog.domains.huggingface.client import HubClient
from neutree_catalog.plugin_manager import PluginManager

logger = logging.getLogger(__name__)


class CatalogServer:
    """MCP server exposing the hub converter and the catalog index."""

    def __init__(self, config: CatalogConfig | None = None) -> None:
        self._config = config or get_config()
        self._mcp: FastMCP | None = None
        self._plugin_manager: PluginManager | None = None
        self._hub_client: HubClient | None = None
        self._catalog: CatalogIndex | None = None

    @property
    def config(self) -> CatalogConfig:
        """Get server configuration."""
        return self._config

    @property
    def mcp(self) -> FastMCP:
        """Get the MCP server instance.

        Raises:
            RuntimeError: If server is not initialized.
        """
        if self._mcp is None:
            raise RuntimeError("Server not initialized.")
        return self._mcp

    @property
    def plugin_manager(self) -> PluginManager | None:
        return self._plugin_manager

    @property
    def hub(self) -> HubClient:
        """Get the hub client, created on first use."""
        if self._hub_client is None:
            self._hub_client = HubClient(self._config)
        return self._hub_client

    @property
    def catalog(self) -> CatalogIndex:
        """Get the catalog index, loading it on first use.

        Raises:
            CatalogLoadError: If the catalog directory does not exist.
        """
        if self._catalog is None:
            self._catalog = CatalogIndex.from_directory(self._config.catalog_dir)
        return self._catalog

    def reload_catalog(self) -> CatalogIndex:
        """Re-read the catalog directory."""
        self._catalog = None
        return self.catalog

    def startup(self) -> None:
        """Run plugin health checks. Safe to call more than once."""
        if self._plugin_manager is not None:
            self._plugin_manager.run_health_checks(self)
            logger.info(
                f"neutree-catalog MCP server started with "
                f"{len(self._plugin_manager.healthy_plugins)}/"
                f"{len(self._plugin_manager.registered_plugins)} plugins active"
            )

    def _create_lifespan(self) -> Callable[[Any], AbstractAsyncContextManager[None]]:
        """Create the lifespan context manager for the MCP server."""
        server_self = self

        @asynccontextmanager
        async def lifespan(_app: Any) -> AsyncIterator[None]:
            logger.info("Starting neutree-catalog MCP server...")
            try:
                server_self.startup()
                yield
            finally:
                logger.info("Shutting down neutree-catalog MCP server...")
                server_self._catalog = None

        return lifespan

    def create_mcp(self) -> FastMCP:
        """Create and configure the FastMCP server."""
        self._plugin_manager = PluginManager()
        self._plugin_manager.load_core_plugins()
        self._plugin_manager.load_entrypoint_plugins()

        mcp = FastMCP(
            name="neutree-catalog",
            instructions="MCP server for Neutree model catalogs - converts Hugging Face "
            "model repositories into ModelCatalog documents and searches, filters "
            "and exports the catalog.",
            lifespan=self._create_lifespan(),
            host=self._config.host,
            port=self._config.port,
        )
        self._mcp = mcp

        self._plugin_manager.register_all_tools(mcp, self)
        self._plugin_manager.register_all_resources(mcp, self)
        self._register_core_resources(mcp)
        self._register_health_endpoint(mcp)

        return mcp

    def _health_payload(self) -> tuple[HTTPStatus, dict[str, Any]]:
        pm = self._plugin_manager
        total = len(pm.registered_plugins) if pm else 0
        healthy = len(pm.healthy_plugins) if pm else 0
        status = HTTPStatus.OK if pm is not None and healthy > 0 else HTTPStatus.SERVICE_UNAVAILABLE
        return status, {
            "status": "healthy" if status is HTTPStatus.OK else "unhealthy",
            "version": __version__,
            "catalog_loaded": self._catalog is not None,
            "plugins": {"total": total, "healthy": healthy},
        }

    def _register_health_endpoint(self, mcp: FastMCP) -> None:
        """Expose GET /health on the HTTP transports."""

        @mcp.custom_route("/health", methods=["GET"])
        async def health(_request: Request) -> JSONResponse:
            status, payload = self._health_payload()
            return JSONResponse(payload, status_code=status)

    def _register_core_resources(self, mcp: FastMCP) -> None:
        """Register resources describing the server itself."""

        @mcp.resource("catalog://server/plugins")
        def server_plugins() -> dict:
            """Get information about loaded plugins and their health."""
            pm = self._plugin_manager
            if pm is None:
                return {"total_plugins": 0, "active_plugins": 0, "plugins": {}}

            plugin_info = {}
            for meta in pm.get_all_metadata():
                plugin_info[meta.name] = {
                    "version": meta.version,
                    "description": meta.description,
                    "maintainer": meta.maintainer,
                    "healthy": meta.name in pm.healthy_plugins,
                }

            return {
                "total_plugins": len(pm.registered_plugins),
                "active_plugins": len(pm.healthy_plugins),
                "plugins": plugin_info,
            }

        logger.info("Registered core MCP resources")


def create_server(config: CatalogConfig | None = None) -> FastMCP:
    """Create and return the MCP server instance."""
    return CatalogServer(config).create_mcp()
