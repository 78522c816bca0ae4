"""Result containers passed between stages and the controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..schemas import Candidate, CatalogItem
from .scoring import ScoreBreakdown


class Severity(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class StageMessage:
    """Log line produced by a stage, stamped when the controller records it."""

    message: str
    severity: Severity = Severity.INFO


@dataclass(frozen=True, slots=True)
class Elimination:
    candidate: Candidate
    reason: str


@dataclass(frozen=True, slots=True)
class ScoredCandidate:
    """Best catalog match for one candidate."""

    candidate: Candidate
    score: int
    matched_item: CatalogItem | None
    breakdown: ScoreBreakdown | None
    estimated_cost: int = 0


@dataclass(frozen=True, slots=True)
class StepState:
    """Survivors and eliminations recorded at the end of one stage."""

    stage: str
    survivors: tuple[Candidate, ...]
    eliminated: tuple[Elimination, ...] = ()
    scored: tuple[ScoredCandidate, ...] | None = None


@dataclass(frozen=True, slots=True)
class WorkingSet:
    """Candidates still in play, plus the ranking once scoring has run."""

    candidates: tuple[Candidate, ...]
    ranking: tuple[ScoredCandidate, ...] | None = None


@dataclass(frozen=True, slots=True)
class StageOutcome:
    step: StepState
    working: WorkingSet
    messages: tuple[StageMessage, ...] = field(default=())

