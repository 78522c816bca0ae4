"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CatalogSettings(BaseModel):
    path: str | None = None

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    pipeline: dict[str, Any] | None = None
    scoring: dict[str, Any] | None = None
    pricing: dict[str, Any] | None = None
    pacing: dict[str, Any] | None = None
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        settings = self.model_dump(exclude_none=True, exclude={"catalog"})
        if self.catalog.path:
            settings["catalog"] = {"path": self.catalog.path}
        return settings


def load_config(raw: Any) -> AppConfig:
    return AppConfig.model_validate(raw if raw is not None else {})
