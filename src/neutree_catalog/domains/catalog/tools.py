"""MCP Tools and resources for browsing the model catalog."""

from typing import TYPE_CHECKING, Any

from mcp.server.fastmcp import FastMCP

from neutree_catalog.domains.catalog.models import CatalogSummary
from neutree_catalog.utils.errors import CatalogLoadError, NotFoundError
from neutree_catalog.utils.response import PaginatedResponse, Verbosity, paginate

if TYPE_CHECKING:
    from neutree_catalog.server import CatalogServer


def format_summary(summary: CatalogSummary, verbosity: Verbosity) -> dict[str, Any]:
    """Render a catalog entry at the requested level of detail."""
    if verbosity == Verbosity.MINIMAL:
        return {"name": summary.name, "task": summary.task}

    result: dict[str, Any] = {
        "name": summary.name,
        "display_name": summary.display_name,
        "task": summary.task,
        "engine": summary.engine,
        "version": summary.version,
        "hf_repo_url": summary.hf_repo_url,
    }
    if verbosity == Verbosity.FULL:
        result["icon_url"] = summary.icon_url
        result["document"] = summary.original
    return result


def register_tools(mcp: FastMCP, server: "CatalogServer") -> None:
    """Register catalog tools with the MCP server."""

    @mcp.tool()
    def list_catalog_models(
        search: str | None = None,
        task: str | None = None,
        limit: int | None = None,
        offset: int = 0,
        verbosity: str = "standard",
    ) -> dict[str, Any]:
        """List models in the catalog, optionally searched and filtered.

        Args:
            search: Case-insensitive text matched against display name, name and task.
            task: Exact task filter, e.g. "text-generation".
            limit: Maximum number of models to return (None for all).
            offset: Number of matching models to skip.
            verbosity: "minimal", "standard" or "full" (includes the document).

        Returns:
            Paginated list of matching catalog entries.
        """
        try:
            matches = server.catalog.search(search, task)
        except CatalogLoadError as e:
            return {"error": "Failed to load catalog", "message": str(e)}

        level = Verbosity.from_str(verbosity)
        offset = max(offset, 0)
        page, total = paginate(matches, offset=offset, limit=limit)
        return PaginatedResponse.build(
            [format_summary(entry, level) for entry in page],
            total=total,
            offset=offset,
            limit=limit,
        )

    @mcp.tool()
    def get_catalog_model(name: str) -> dict[str, Any]:
        """Get a catalog entry and its full ModelCatalog document.

        Args:
            name: The entry's metadata.name.

        Returns:
            The flattened entry with its document.
        """
        try:
            summary = server.catalog.get(name)
        except NotFoundError as e:
            return {"error": "Model not found", "message": str(e)}
        except CatalogLoadError as e:
            return {"error": "Failed to load catalog", "message": str(e)}
        return format_summary(summary, Verbosity.FULL)

    @mcp.tool()
    def list_catalog_tasks() -> dict[str, Any]:
        """List the distinct tasks present in the catalog, for filtering.

        Returns:
            Sorted task names with the number of models per task.
        """
        try:
            catalog = server.catalog
        except CatalogLoadError as e:
            return {"error": "Failed to load catalog", "message": str(e)}

        tasks = catalog.tasks()
        return {
            "tasks": tasks,
            "counts": {t: len(catalog.search(task=t)) for t in tasks},
        }

    @mcp.tool()
    def export_catalog_yaml(names: list[str]) -> dict[str, Any]:
        """Export selected catalog entries as YAML ready to apply.

        Args:
            names: metadata.name of each entry to export.

        Returns:
            The YAML text and the number of exported documents.
        """
        if not names:
            return {"error": "No models selected", "message": "Provide at least one name"}
        try:
            yaml_text = server.catalog.export_yaml(names)
        except NotFoundError as e:
            return {"error": "Model not found", "message": str(e)}
        except CatalogLoadError as e:
            return {"error": "Failed to load catalog", "message": str(e)}
        return {"count": len(set(names)), "yaml": yaml_text}

    @mcp.tool()
    def reload_catalog() -> dict[str, Any]:
        """Re-read the catalog directory after files were added or changed.

        Returns:
            Number of entries loaded.
        """
        try:
            catalog = server.reload_catalog()
        except CatalogLoadError as e:
            return {"error": "Failed to load catalog", "message": str(e)}
        return {"loaded": len(catalog), "catalog_dir": str(server.config.catalog_dir)}


def register_resources(mcp: FastMCP, server: "CatalogServer") -> None:
    """Register catalog resources with the MCP server."""

    @mcp.resource("catalog://models")
    def catalog_models() -> list[dict]:
        """All catalog entries in flattened form."""
        return [format_summary(entry, Verbosity.STANDARD) for entry in server.catalog]

    @mcp.resource("catalog://bundle.yaml", mime_type="application/yaml")
    def catalog_bundle() -> str:
        """Every catalog document as a single multi-document YAML stream."""
        return server.catalog.bundle_yaml()
