"""Catalog providers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Sequence

import structlog
import yaml

from ..schemas import CatalogItem
from .defaults import DEFAULT_CATALOG


class StaticCatalogProvider:
    """In-memory catalog table."""

    def __init__(self, items: Iterable[CatalogItem | dict[str, Any]]):
        self._items = tuple(
            item if isinstance(item, CatalogItem) else CatalogItem.model_validate(item)
            for item in items
        )

    def list_items(self) -> Sequence[CatalogItem]:
        return self._items


class YamlCatalogProvider:
    """Catalog loaded once from a YAML document.

    The document is either a list of items or a mapping with an ``items`` key.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._items: tuple[CatalogItem, ...] | None = None
        self._logger = structlog.get_logger(__name__)

    def list_items(self) -> Sequence[CatalogItem]:
        if self._items is None:
            self._items = self._load()
        return self._items

    def _load(self) -> tuple[CatalogItem, ...]:
        with self._path.open("r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle) or []
        if isinstance(raw, dict):
            raw = raw.get("items", [])
        if not isinstance(raw, list):
            raise ValueError(f"Catalog file {self._path} must contain a list of items")
        items = tuple(CatalogItem.model_validate(entry) for entry in raw)
        self._logger.info("catalog.loaded", path=str(self._path), items=len(items))
        return items


def default_catalog() -> StaticCatalogProvider:
    """Return the bundled coating catalog."""
    return StaticCatalogProvider(DEFAULT_CATALOG)


__all__ = [
    "DEFAULT_CATALOG",
    "StaticCatalogProvider",
    "YamlCatalogProvider",
    "default_catalog",
]
