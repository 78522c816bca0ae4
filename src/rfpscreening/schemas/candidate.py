from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any

import pendulum
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

DEFAULT_QUANTITY = 1000


class Candidate(BaseModel):
    """Procurement request evaluated against the product catalog."""

    candidate_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("candidate_id", "id"),
    )
    title: str = ""
    requirements: str | list[str] | None = None
    deadline: datetime | None = None
    quantity: int | float = DEFAULT_QUANTITY
    description: str = ""

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    @field_validator("candidate_id", mode="before")
    @classmethod
    def _coerce_identifier(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("title", "description", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("requirements", mode="before")
    @classmethod
    def _coerce_requirements(cls, value: Any) -> str | list[str] | None:
        if isinstance(value, str):
            return value
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value if item is not None]
        return None

    @field_validator("deadline", mode="before")
    @classmethod
    def _parse_deadline(cls, value: Any) -> datetime | None:
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return pendulum.datetime(value.year, value.month, value.day)
        try:
            parsed = pendulum.parse(str(value))
        except (ValueError, TypeError):
            return None
        if not isinstance(parsed, datetime):
            return None
        return parsed

    @field_validator("quantity", mode="before")
    @classmethod
    def _default_quantity(cls, value: Any) -> int | float:
        if isinstance(value, bool) or value is None:
            return DEFAULT_QUANTITY
        if isinstance(value, (int, float)):
            number = value
        else:
            try:
                number = float(str(value).strip())
            except ValueError:
                return DEFAULT_QUANTITY
            if number.is_integer():
                number = int(number)
        if isinstance(number, float) and (math.isnan(number) or math.isinf(number)):
            return DEFAULT_QUANTITY
        return number

    @property
    def requirements_text(self) -> str:
        """Lower-cased requirement text used for keyword matching."""
        if self.requirements is None:
            return ""
        if isinstance(self.requirements, list):
            return " ".join(str(item) for item in self.requirements).lower()
        return self.requirements.lower()

    @property
    def application_text(self) -> str:
        return f"{self.description} {self.title}".lower()
