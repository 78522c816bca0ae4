"""Weighted match scoring between a procurement request and a catalog item."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..schemas import Candidate, CatalogItem
from .numbers import round_half_up


@dataclass(frozen=True)
class ScoringConfig:
    """Weights and caps for the four scoring criteria."""

    specification_weight: int = 40
    compliance_weight: int = 30
    quantity_weight: int = 20
    application_weight: int = 10
    partial_quantity_points: int = 8
    specification_cap: int = 12
    compliance_cap: int = 3

    def __post_init__(self) -> None:
        total = (
            self.specification_weight
            + self.compliance_weight
            + self.quantity_weight
            + self.application_weight
        )
        if total > 100:
            raise ValueError(f"Scoring weights must sum to at most 100, got {total}")
        if min(
            self.specification_weight,
            self.compliance_weight,
            self.quantity_weight,
            self.application_weight,
            self.partial_quantity_points,
        ) < 0:
            raise ValueError("Scoring weights must be non-negative")
        if self.partial_quantity_points > self.quantity_weight:
            raise ValueError("partial_quantity_points cannot exceed quantity_weight")
        if self.specification_cap <= 0 or self.compliance_cap <= 0:
            raise ValueError("Scoring caps must be positive")


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    """Per-criterion points for one request/item pair."""

    specification: int
    compliance: int
    quantity: int
    application: int
    total: int
    reasons: tuple[str, ...] = ()
    compliance_matches: tuple[str, ...] = field(default=())


# (requirement keywords, rated property, label)
_SPECIFICATION_RULES: tuple[tuple[tuple[str, ...], str, str], ...] = (
    (("corrosion",), "corrosion_resistance", "Corrosion"),
    (("uv", "sun", "exterior"), "uv_resistance", "UV"),
    (("chemical",), "durability", "Chemical/durability"),
)


def rating_points(value: str | float | None) -> int:
    """Map a qualitative rating to 0-3 points."""
    if value is None:
        return 0
    normalized = str(value).lower()
    if "very" in normalized:
        return 3
    if "high" in normalized:
        return 2
    if "medium" in normalized:
        return 1
    return 0


def _leading_word(text: str) -> str:
    parts = text.split(" ", 1)
    return parts[0].lower()


class ScoringEngine:
    """Compute the weighted match score of a candidate against a catalog item."""

    def __init__(self, *, config: ScoringConfig | None = None) -> None:
        self._config = config or ScoringConfig()

    @property
    def config(self) -> ScoringConfig:
        return self._config

    def score(self, item: CatalogItem, candidate: Candidate) -> ScoreBreakdown:
        requirement_text = candidate.requirements_text
        reasons: list[str] = []

        specification = self._specification_points(item, requirement_text, reasons)

        compliance_matches = tuple(
            standard
            for standard in item.compliance
            if standard
            and (
                _leading_word(standard) in requirement_text
                or standard.lower() in requirement_text
            )
        )
        compliance = self._compliance_points(len(compliance_matches))
        if compliance_matches:
            reasons.append(f"Compliance matched ({', '.join(compliance_matches)})")

        quantity = self._quantity_points(item, candidate.quantity, reasons)
        application = self._application_points(item, candidate.application_text, reasons)

        total = specification + compliance + quantity + application
        return ScoreBreakdown(
            specification=specification,
            compliance=compliance,
            quantity=quantity,
            application=application,
            total=min(max(total, 0), 100),
            reasons=tuple(reasons),
            compliance_matches=compliance_matches,
        )

    def _specification_points(
        self,
        item: CatalogItem,
        requirement_text: str,
        reasons: list[str],
    ) -> int:
        points = 0
        for keywords, prop, label in _SPECIFICATION_RULES:
            if not any(keyword in requirement_text for keyword in keywords):
                continue
            rating = item.rating(prop)
            points += rating_points(rating) * 2
            reasons.append(f"{label} matched ({rating or 'none'})")
        cap = self._config.specification_cap
        return round_half_up(min(points, cap) / cap * self._config.specification_weight)

    def _compliance_points(self, matched: int) -> int:
        cap = self._config.compliance_cap
        return round_half_up(min(matched, cap) / cap * self._config.compliance_weight)

    def _quantity_points(
        self,
        item: CatalogItem,
        quantity: float,
        reasons: list[str],
    ) -> int:
        if any(quantity >= size for size in item.pack_sizes):
            reasons.append(f"Quantity {quantity:g} fits pack sizes")
            return self._config.quantity_weight
        if quantity > 0:
            reasons.append(f"Quantity {quantity:g} below smallest pack size")
            return self._config.partial_quantity_points
        return 0

    def _application_points(
        self,
        item: CatalogItem,
        application_text: str,
        reasons: list[str],
    ) -> int:
        for application in item.applications:
            keyword = _leading_word(application)
            if keyword and keyword in application_text:
                reasons.append(f"Application matched ({application})")
                return self._config.application_weight
        return 0
