"""Elimination stages run in order by the pipeline."""

from ..models import (
    Elimination,
    ScoredCandidate,
    Severity,
    StageMessage,
    StageOutcome,
    StepState,
    WorkingSet,
)
from .base import Stage
from .deadline import DeadlineConfig, DeadlineStage
from .shortlist import ShortlistConfig, ShortlistStage
from .specification import SpecificationConfig, SpecificationStage
from .threshold import ScoringStage, ThresholdConfig

__all__ = [
    "DeadlineConfig",
    "DeadlineStage",
    "Elimination",
    "ScoredCandidate",
    "ScoringStage",
    "Severity",
    "ShortlistConfig",
    "ShortlistStage",
    "SpecificationConfig",
    "SpecificationStage",
    "Stage",
    "StageMessage",
    "StageOutcome",
    "StepState",
    "ThresholdConfig",
    "WorkingSet",
]
