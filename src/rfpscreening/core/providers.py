"""Collaborator contracts consumed by the engine."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ..schemas import CatalogItem


@runtime_checkable
class CatalogProvider(Protocol):
    """Read-only source of catalog items."""

    def list_items(self) -> Sequence[CatalogItem]:
        """Return catalog items in a stable order."""
