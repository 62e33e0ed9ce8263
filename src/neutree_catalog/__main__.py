"""Entry point for the neutree-catalog MCP server."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from neutree_catalog import __version__
from neutree_catalog.config import CatalogConfig, LogLevel, TransportMode


def setup_logging(level: LogLevel) -> None:
    """Configure logging for the server."""
    logging.basicConfig(
        level=level.value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="neutree-catalog-mcp",
        description="MCP server for Neutree model catalogs",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Transport options
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "streamable-http"],
        default=None,
        help="Transport mode (default: from config or stdio)",
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind HTTP server to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind HTTP server to (default: 8000)",
    )

    # Catalog options
    parser.add_argument(
        "--catalog-dir",
        default=None,
        help="Directory of ModelCatalog YAML files (default: ./catalog)",
    )
    parser.add_argument(
        "--hub-endpoint",
        default=None,
        help="Model hub base URL (default: https://huggingface.co)",
    )

    # Logging
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: INFO)",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> CatalogConfig:
    """Build config from args, falling back to environment/defaults."""
    config_kwargs: dict[str, Any] = {}

    if args.transport:
        config_kwargs["transport"] = TransportMode(args.transport)

    if args.host:
        config_kwargs["host"] = args.host

    if args.port:
        config_kwargs["port"] = args.port

    if args.catalog_dir:
        config_kwargs["catalog_dir"] = Path(args.catalog_dir)

    if args.hub_endpoint:
        config_kwargs["hub_endpoint"] = args.hub_endpoint

    if args.log_level:
        config_kwargs["log_level"] = LogLevel(args.log_level)

    return CatalogConfig(**config_kwargs)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    config = build_config(args)

    setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.info(f"Starting neutree-catalog MCP server v{__version__}")

    if not config.catalog_dir.is_dir():
        logger.warning(
            f"Catalog directory {config.catalog_dir} does not exist; "
            "catalog tools will report errors until it is created"
        )

    from neutree_catalog.server import create_server

    mcp = create_server(config)

    if config.transport == TransportMode.STDIO:
        logger.info("Running with stdio transport")
    else:
        logger.info(
            f"Running with {config.transport.value} transport on {config.host}:{config.port}"
        )
    mcp.run(transport=config.transport.value)

    return 0


if __name__ == "__main__":
    sys.exit(main())
