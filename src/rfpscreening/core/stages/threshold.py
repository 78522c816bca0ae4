"""Catalog scoring and score-threshold stage."""

from __future__ import annotations

from dataclasses import dataclass

from ...schemas import Candidate, CatalogItem
from ..models import (
    Elimination,
    ScoredCandidate,
    Severity,
    StageMessage,
    StageOutcome,
    StepState,
    WorkingSet,
)
from ..numbers import round_half_up
from ..providers import CatalogProvider
from ..scoring import ScoringEngine


@dataclass(frozen=True)
class ThresholdConfig:
    min_score: int = 40


class ScoringStage:
    """Score survivors against the catalog and drop those below threshold."""

    name = "Scoring & Threshold Filter"

    def __init__(
        self,
        *,
        engine: ScoringEngine,
        catalog: CatalogProvider,
        config: ThresholdConfig | None = None,
    ) -> None:
        self._engine = engine
        self._catalog = catalog
        self._config = config or ThresholdConfig()

    @property
    def min_score(self) -> int:
        return self._config.min_score

    def apply(self, working: WorkingSet) -> StageOutcome:
        items = list(self._catalog.list_items())
        ranking = [self.best_match(candidate, items) for candidate in working.candidates]
        # sorted() is stable: equal scores keep their input order.
        ranking = sorted(ranking, key=lambda entry: entry.score, reverse=True)

        messages = [
            StageMessage(
                "Scoring complete: Top score {top}, Lowest score {low}".format(
                    top=ranking[0].score if ranking else 0,
                    low=ranking[-1].score if ranking else 0,
                )
            )
        ]

        threshold = self._config.min_score
        passed: list[ScoredCandidate] = []
        eliminated: list[Elimination] = []
        for entry in ranking:
            if entry.score < threshold:
                eliminated.append(
                    Elimination(
                        candidate=entry.candidate,
                        reason=f"Score {entry.score} below threshold {threshold}",
                    )
                )
            else:
                passed.append(entry)

        messages.append(
            StageMessage(
                f"Score filter: {len(passed)} passed (score >= {threshold}), "
                f"{len(eliminated)} eliminated",
                Severity.SUCCESS,
            )
        )
        survivors = tuple(entry.candidate for entry in passed)
        return StageOutcome(
            step=StepState(
                stage=self.name,
                survivors=survivors,
                eliminated=tuple(eliminated),
                scored=tuple(passed),
            ),
            working=WorkingSet(candidates=survivors, ranking=tuple(passed)),
            messages=tuple(messages),
        )

    def best_match(self, candidate: Candidate, items: list[CatalogItem]) -> ScoredCandidate:
        """Pick the highest-scoring item; the first one wins ties.

        An item must score above zero to count as a match.
        """
        best = ScoredCandidate(candidate=candidate, score=0, matched_item=None, breakdown=None)
        for item in items:
            breakdown = self._engine.score(item, candidate)
            if breakdown.total > best.score:
                best = ScoredCandidate(
                    candidate=candidate,
                    score=breakdown.total,
                    matched_item=item,
                    breakdown=breakdown,
                    estimated_cost=round_half_up(item.cost_per_unit * candidate.quantity),
                )
        return best
