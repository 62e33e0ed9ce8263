"""In-memory index over a directory of ModelCatalog YAML documents."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

import yaml

from neutree_catalog.domains.catalog.models import CatalogSummary
from neutree_catalog.utils.errors import CatalogLoadError, NotFoundError

logger = logging.getLogger(__name__)

CATALOG_KIND = "ModelCatalog"
YAML_SUFFIXES = (".yaml", ".yml")


def dump_document(document: Mapping[str, Any]) -> str:
    """Dump one document as block-style YAML, keys in document order."""
    return yaml.safe_dump(
        dict(document), sort_keys=False, allow_unicode=True, width=float("inf")
    )


class CatalogIndex:
    """Flattened, searchable view of catalog documents.

    Entries keep the order they were loaded in; from_directory loads files
    in sorted path order so the order is stable between runs.
    """

    def __init__(self, summaries: Iterable[CatalogSummary] = ()) -> None:
        self._entries: list[CatalogSummary] = []
        self._by_name: dict[str, CatalogSummary] = {}
        for summary in summaries:
            self.add(summary)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CatalogSummary]:
        return iter(self._entries)

    def add(self, summary: CatalogSummary) -> None:
        """Add an entry; a later entry with the same name replaces the earlier one."""
        existing = self._by_name.get(summary.name)
        if existing is not None:
            logger.warning(f"Duplicate catalog entry '{summary.name}', keeping the last one")
            self._entries.remove(existing)
        self._entries.append(summary)
        self._by_name[summary.name] = summary

    @classmethod
    def from_documents(cls, documents: Iterable[Mapping[str, Any]]) -> CatalogIndex:
        """Build an index from already-parsed documents, skipping other kinds."""
        index = cls()
        for document in documents:
            if not isinstance(document, Mapping) or document.get("kind") != CATALOG_KIND:
                continue
            index.add(CatalogSummary.from_document(document))
        return index

    @classmethod
    def from_directory(cls, directory: str | Path) -> CatalogIndex:
        """Load every ModelCatalog document under a directory.

        Files that cannot be read or parsed are logged and skipped, as are
        documents of other kinds.

        Raises:
            CatalogLoadError: If the directory does not exist.
        """
        root = Path(directory)
        if not root.is_dir():
            raise CatalogLoadError(f"Catalog directory not found: {root}")

        index = cls()
        paths = sorted(p for p in root.rglob("*") if p.is_file() and p.suffix in YAML_SUFFIXES)
        for path in paths:
            logger.debug(f"Processing: {path}")
            try:
                documents = [d for d in yaml.safe_load_all(path.read_text(encoding="utf-8")) if d]
                for document in documents:
                    if isinstance(document, Mapping) and document.get("kind") == CATALOG_KIND:
                        index.add(CatalogSummary.from_document(document))
            except (OSError, yaml.YAMLError, KeyError, TypeError, ValueError) as e:
                logger.error(f"Error processing {path}: {e}")

        logger.info(f"Loaded {len(index)} catalog entries from {root}")
        return index

    def get(self, name: str) -> CatalogSummary:
        """Get an entry by metadata.name.

        Raises:
            NotFoundError: If no entry has that name.
        """
        summary = self._by_name.get(name)
        if summary is None:
            raise NotFoundError("ModelCatalog", name)
        return summary

    def search(self, term: str | None = None, task: str | None = None) -> list[CatalogSummary]:
        """Entries matching a free-text term and/or an exact task."""
        return [entry for entry in self._entries if entry.matches(term, task)]

    def tasks(self) -> list[str]:
        """Distinct tasks, sorted."""
        return sorted({entry.task for entry in self._entries})

    def export_yaml(self, names: Iterable[str]) -> str:
        """YAML for the selected entries, in index order.

        A single entry is dumped on its own; several are separated by
        ``---`` lines.

        Raises:
            NotFoundError: If any name is unknown.
        """
        wanted = set()
        for name in names:
            self.get(name)
            wanted.add(name)
        selected = [entry for entry in self._entries if entry.name in wanted]
        return "---\n".join(dump_document(entry.original) for entry in selected)

    def bundle_yaml(self) -> str:
        """Every document as one multi-document YAML stream."""
        return "\n".join(f"---\n{dump_document(entry.original)}" for entry in self._entries)
