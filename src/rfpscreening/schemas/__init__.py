"""Pydantic schema definitions for procurement requests and catalog items."""

from __future__ import annotations

from .candidate import DEFAULT_QUANTITY, Candidate
from .catalog import CatalogItem

__all__ = [
    "Candidate",
    "CatalogItem",
    "DEFAULT_QUANTITY",
]
