"""MCP Tools for Hugging Face to ModelCatalog conversion."""

from typing import TYPE_CHECKING, Any

from mcp.server.fastmcp import FastMCP

from neutree_catalog.utils.errors import CatalogError

if TYPE_CHECKING:
    from neutree_catalog.server import CatalogServer

OUTPUT_FORMATS = ("yaml", "json", "dict")


def register_tools(mcp: FastMCP, server: "CatalogServer") -> None:
    """Register conversion tools with the MCP server."""

    @mcp.tool()
    async def convert_hf_model(repo_url: str, output_format: str = "yaml") -> dict[str, Any]:
        """Convert a Hugging Face model repository into a Neutree ModelCatalog.

        Reads the repository's pipeline tag and file listing from the hub,
        picks the primary weights file (.gguf selects llama-cpp, safetensors
        selects vllm) and builds a catalog document with default scheduler
        and engine settings.

        Args:
            repo_url: Repository URL, e.g. https://huggingface.co/meta-llama/Llama-3-8B.
            output_format: "yaml", "json", or "dict" for a structured document.

        Returns:
            Summary of the inferred settings plus the serialized document.
        """
        if output_format not in OUTPUT_FORMATS:
            return {
                "error": "Invalid output format",
                "message": f"output_format must be one of: {', '.join(OUTPUT_FORMATS)}",
            }

        try:
            catalog = await server.hub.convert_async(repo_url)
        except CatalogError as e:
            return {
                "error": "Conversion failed",
                "error_type": type(e).__name__,
                "message": str(e),
            }

        model = catalog.spec.model
        result: dict[str, Any] = {
            "name": catalog.metadata.name,
            "model": model.name,
            "file": model.file,
            "task": model.task.value,
            "engine": catalog.spec.engine.engine.value,
            "format": output_format,
        }
        if output_format == "yaml":
            result["document"] = catalog.to_yaml()
        elif output_format == "json":
            result["document"] = catalog.to_json()
        else:
            result["document"] = catalog.to_dict()
        return result
