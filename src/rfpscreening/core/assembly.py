"""Final recommendation assembly."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from ..schemas import Candidate, CatalogItem
from .models import ScoredCandidate
from .pricing import PricingBreakdown, PricingCalculator

DEFAULT_COMPLIANCE_SUMMARY = "Standard ISO/ASTM"


@dataclass(frozen=True, slots=True)
class FinalSelection:
    """Best-ranked request with its matched product and priced proposal."""

    candidate: Candidate
    item: CatalogItem
    match_score: int
    justification: str
    pricing: PricingBreakdown
    total_cost: int
    technical: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class PricedCandidate:
    candidate: Candidate
    score: int
    pricing: PricingBreakdown


class ResultAssembler:
    """Build the final selection from the shortlist."""

    def __init__(self, *, pricing: PricingCalculator | None = None) -> None:
        self._pricing = pricing or PricingCalculator()

    def assemble(self, shortlist: Sequence[ScoredCandidate]) -> FinalSelection | None:
        if not shortlist:
            return None
        top = shortlist[0]
        if top.matched_item is None:
            return None

        item = top.matched_item
        quantity = top.candidate.quantity
        pricing = self._pricing.price(item, quantity)
        matches = top.breakdown.compliance_matches if top.breakdown else ()

        return FinalSelection(
            candidate=top.candidate,
            item=item,
            match_score=top.score,
            justification=(
                f"Highest match score ({top.score}%) among "
                f"{len(shortlist)} shortlisted candidates"
            ),
            pricing=pricing,
            total_cost=pricing.total_cost,
            technical={
                "quantity": quantity,
                "compliance": ", ".join(matches) or DEFAULT_COMPLIANCE_SUMMARY,
                "specifications": dict(item.properties),
            },
        )

    def price_all(self, shortlist: Sequence[ScoredCandidate]) -> list[PricedCandidate]:
        """Price every shortlisted entry that has a matched item."""
        return [
            PricedCandidate(
                candidate=entry.candidate,
                score=entry.score,
                pricing=self._pricing.price(entry.matched_item, entry.candidate.quantity),
            )
            for entry in shortlist
            if entry.matched_item is not None
        ]
