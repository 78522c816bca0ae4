"""Catalog item schema."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CatalogItem(BaseModel):
    """Product entry with qualitative ratings, standards and unit cost."""

    sku: str
    product_name: str
    category: str = ""
    properties: dict[str, str | float] = Field(default_factory=dict)
    compliance: list[str] = Field(default_factory=list)
    cost_per_unit: float = Field(default=0.0, ge=0)
    pack_sizes: list[float] = Field(default_factory=list)
    applications: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)

    def rating(self, name: str) -> str | None:
        value = self.properties.get(name)
        return None if value is None else str(value)
