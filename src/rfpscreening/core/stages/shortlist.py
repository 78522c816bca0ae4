"""Final shortlist truncation stage."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import (
    Elimination,
    ScoredCandidate,
    Severity,
    StageMessage,
    StageOutcome,
    StepState,
    WorkingSet,
)
from ..selection import ShortlistSelector


@dataclass(frozen=True)
class ShortlistConfig:
    top_n: int = 3
    min_score: int = 40


class ShortlistStage:
    """Keep the top-ranked survivors and eliminate the rest."""

    name = "Final Shortlist"

    def __init__(
        self,
        *,
        selector: ShortlistSelector | None = None,
        config: ShortlistConfig | None = None,
    ) -> None:
        self._selector = selector or ShortlistSelector()
        self._config = config or ShortlistConfig()

    def apply(self, working: WorkingSet) -> StageOutcome:
        ranking = self._ranking(working)
        top_n = self._config.top_n
        shortlisted = self._selector.shortlist(ranking, top_n, self._config.min_score)
        kept = {id(entry) for entry in shortlisted}
        eliminated = tuple(
            Elimination(candidate=entry.candidate, reason=f"Ranked beyond top {top_n}")
            for entry in ranking
            if id(entry) not in kept
        )
        survivors = tuple(entry.candidate for entry in shortlisted)
        return StageOutcome(
            step=StepState(stage=self.name, survivors=survivors, eliminated=eliminated),
            working=WorkingSet(candidates=survivors, ranking=tuple(shortlisted)),
            messages=(
                StageMessage(f"Final shortlist: {len(survivors)} candidates selected", Severity.SUCCESS),
            ),
        )

    @staticmethod
    def _ranking(working: WorkingSet) -> tuple[ScoredCandidate, ...]:
        if working.ranking is not None:
            return working.ranking
        # Unscored input keeps its order with a zero score.
        return tuple(
            ScoredCandidate(candidate=candidate, score=0, matched_item=None, breakdown=None)
            for candidate in working.candidates
        )
