"""Core elimination-and-scoring engine components."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .assembly import FinalSelection, PricedCandidate, ResultAssembler
from .controller import PhaseController, PipelineSnapshot
from .elimination import EliminationPipeline, PipelineConfig, PipelineResult
from .events import EventLog, LogEvent
from .exceptions import (
    InvalidTransitionError,
    PartitionError,
    PipelineError,
    RunRejectedError,
    StageExecutionError,
)
from .models import (
    Elimination,
    ScoredCandidate,
    Severity,
    StageMessage,
    StageOutcome,
    StepState,
    WorkingSet,
)
from .pacing import ImmediatePacer, PacingConfig, Pacer, ProfilePacer, SpeedProfile
from .phases import Phase
from .pricing import PricingBreakdown, PricingCalculator, PricingConfig
from .providers import CatalogProvider
from .scoring import ScoreBreakdown, ScoringConfig, ScoringEngine
from .selection import ShortlistSelector

__all__ = [
    "CatalogProvider",
    "Elimination",
    "EliminationPipeline",
    "EventLog",
    "FinalSelection",
    "ImmediatePacer",
    "InvalidTransitionError",
    "LogEvent",
    "Pacer",
    "PacingConfig",
    "PartitionError",
    "Phase",
    "PhaseController",
    "PipelineConfig",
    "PipelineError",
    "PipelineResult",
    "PipelineSnapshot",
    "PricedCandidate",
    "PricingBreakdown",
    "PricingCalculator",
    "PricingConfig",
    "ProfilePacer",
    "ResultAssembler",
    "RunRejectedError",
    "ScoreBreakdown",
    "ScoredCandidate",
    "ScoringConfig",
    "ScoringEngine",
    "Severity",
    "ShortlistSelector",
    "SpeedProfile",
    "StageExecutionError",
    "StageMessage",
    "StageOutcome",
    "StepState",
    "WorkingSet",
]
