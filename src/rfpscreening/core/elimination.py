"""Ordered elimination stages over a working set of requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

from ..schemas import Candidate
from .exceptions import PartitionError
from .models import ScoredCandidate, StageOutcome, StepState, WorkingSet
from .providers import CatalogProvider
from .scoring import ScoringEngine
from .selection import ShortlistSelector
from .stages import (
    DeadlineConfig,
    DeadlineStage,
    ScoringStage,
    ShortlistConfig,
    ShortlistStage,
    SpecificationStage,
    Stage,
    ThresholdConfig,
)


@dataclass(frozen=True)
class PipelineConfig:
    """Elimination thresholds."""

    min_deadline_days: int = 7
    score_threshold: int = 40
    top_n: int = 3

    def __post_init__(self) -> None:
        if self.top_n < 1:
            raise ValueError("top_n must be at least 1")


@dataclass(frozen=True, slots=True)
class PipelineResult:
    steps: tuple[StepState, ...]
    shortlist: tuple[ScoredCandidate, ...]


class EliminationPipeline:
    """Run a working set through deadline, specification, scoring and shortlist stages."""

    def __init__(self, stages: Iterable[Stage]) -> None:
        self._stages = tuple(stages)

    @classmethod
    def from_config(
        cls,
        catalog: CatalogProvider,
        *,
        config: PipelineConfig | None = None,
        engine: ScoringEngine | None = None,
        selector: ShortlistSelector | None = None,
        now_provider: Callable[[], Any] | None = None,
    ) -> "EliminationPipeline":
        config = config or PipelineConfig()
        return cls(
            [
                DeadlineStage(
                    config=DeadlineConfig(min_days=config.min_deadline_days),
                    now_provider=now_provider,
                ),
                SpecificationStage(),
                ScoringStage(
                    engine=engine or ScoringEngine(),
                    catalog=catalog,
                    config=ThresholdConfig(min_score=config.score_threshold),
                ),
                ShortlistStage(
                    selector=selector,
                    config=ShortlistConfig(
                        top_n=config.top_n,
                        min_score=config.score_threshold,
                    ),
                ),
            ]
        )

    @property
    def stages(self) -> tuple[Stage, ...]:
        return self._stages

    def apply(self, stage: Stage, working: WorkingSet) -> StageOutcome:
        """Run one stage and verify it partitioned its input."""
        outcome = stage.apply(working)
        self._check_partition(stage, working.candidates, outcome.step)
        return outcome

    def run(self, candidates: Sequence[Candidate]) -> PipelineResult:
        """Run every stage synchronously and return the step history."""
        working = WorkingSet(candidates=tuple(candidates))
        steps: list[StepState] = []
        for stage in self._stages:
            outcome = self.apply(stage, working)
            steps.append(outcome.step)
            working = outcome.working
        return PipelineResult(steps=tuple(steps), shortlist=working.ranking or ())

    @staticmethod
    def _check_partition(
        stage: Stage,
        before: Sequence[Candidate],
        step: StepState,
    ) -> None:
        after = [id(candidate) for candidate in step.survivors]
        after.extend(id(entry.candidate) for entry in step.eliminated)
        if sorted(after) != sorted(id(candidate) for candidate in before):
            raise PartitionError(
                f"Stage {stage.name!r} did not partition its input: "
                f"{len(before)} in, {len(step.survivors)} kept, {len(step.eliminated)} eliminated"
            )
