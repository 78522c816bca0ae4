"""Specification and compliance keyword stage."""

from __future__ import annotations

from dataclasses import dataclass

from ...schemas import Candidate
from ..models import (
    Elimination,
    Severity,
    StageMessage,
    StageOutcome,
    StepState,
    WorkingSet,
)
from .base import partition_counts


@dataclass(frozen=True)
class SpecificationConfig:
    keywords: tuple[str, ...] = ("corrosion", "uv", "chemical", "iso", "astm")


class SpecificationStage:
    """Eliminate requests naming none of the critical specification keywords."""

    name = "Spec/Compliance Filter"
    reason = "Missing critical specification or compliance keywords"

    def __init__(self, *, config: SpecificationConfig | None = None) -> None:
        self._config = config or SpecificationConfig()
        self._keywords = tuple(keyword.lower() for keyword in self._config.keywords)

    def apply(self, working: WorkingSet) -> StageOutcome:
        survivors: list[Candidate] = []
        eliminated: list[Elimination] = []
        for candidate in working.candidates:
            if self.has_keywords(candidate):
                survivors.append(candidate)
            else:
                eliminated.append(Elimination(candidate=candidate, reason=self.reason))

        return StageOutcome(
            step=StepState(
                stage=self.name,
                survivors=tuple(survivors),
                eliminated=tuple(eliminated),
            ),
            working=WorkingSet(candidates=tuple(survivors)),
            messages=(
                StageMessage(
                    f"Spec/Compliance filter: {partition_counts(survivors, eliminated)}",
                    Severity.SUCCESS,
                ),
            ),
        )

    def has_keywords(self, candidate: Candidate) -> bool:
        text = candidate.requirements_text
        return any(keyword in text for keyword in self._keywords)
