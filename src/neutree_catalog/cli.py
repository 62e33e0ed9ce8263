"""hf2catalog: convert a Hugging Face model repo URL into a Neutree ModelCatalog.

Usage:
    hf2catalog <repo_url> [--json]

The document is written to stdout as YAML (or JSON with --json). Errors are
written to stderr as ``Error: <message>`` with exit status 1.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from neutree_catalog import __version__
from neutree_catalog.config import CatalogConfig, LogLevel, get_config
from neutree_catalog.domains.huggingface.client import HubClient
from neutree_catalog.utils.errors import CatalogError

logger = logging.getLogger(__name__)


def setup_logging(level: LogLevel) -> None:
    """Configure logging. Stdout carries the document, so logs go to stderr."""
    logging.basicConfig(
        level=level.value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="hf2catalog",
        description="Convert a Hugging Face model repo URL into a Neutree ModelCatalog",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "repo_url",
        help="Hugging Face model URL, e.g. https://huggingface.co/<owner>/<repo>",
    )
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output JSON instead of YAML",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None, config: CatalogConfig | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(LogLevel(args.log_level))

    try:
        client = HubClient(config or get_config())
        catalog = client.convert(args.repo_url)
    except (CatalogError, ValidationError) as e:
        logger.debug(f"Conversion of {args.repo_url} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(catalog.to_json())
    else:
        sys.stdout.write(catalog.to_yaml())
    return 0


if __name__ == "__main__":
    sys.exit(main())
