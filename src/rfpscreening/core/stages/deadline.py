"""Deadline feasibility stage."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable

import pendulum

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

SECONDS_PER_DAY = 86_400


@dataclass(frozen=True)
class DeadlineConfig:
    min_days: int = 7


class DeadlineStage:
    """Eliminate requests that leave too little time before the deadline.

    The cut is made on the exact remaining duration. The reason reports the
    remaining days rounded up, capped one below ``min_days`` so a request
    just short of the limit never reads as meeting it.
    """

    name = "Deadline Validation"

    def __init__(
        self,
        *,
        config: DeadlineConfig | None = None,
        now_provider: Callable[[], Any] | None = None,
    ) -> None:
        self._config = config or DeadlineConfig()
        self._now_provider = now_provider or pendulum.now

    def apply(self, working: WorkingSet) -> StageOutcome:
        now = pendulum.instance(self._now_provider())
        min_days = self._config.min_days
        survivors: list[Candidate] = []
        eliminated: list[Elimination] = []

        for candidate in working.candidates:
            remaining = self.remaining_days(candidate, now)
            if remaining is not None and remaining < min_days:
                whole_days = min(math.ceil(remaining), min_days - 1)
                eliminated.append(
                    Elimination(
                        candidate=candidate,
                        reason=f"Insufficient deadline ({whole_days} days < {min_days} days required)",
                    )
                )
            else:
                survivors.append(candidate)

        severity = Severity.WARNING if eliminated else Severity.SUCCESS
        return StageOutcome(
            step=StepState(
                stage=self.name,
                survivors=tuple(survivors),
                eliminated=tuple(eliminated),
            ),
            working=WorkingSet(candidates=tuple(survivors)),
            messages=(
                StageMessage(f"Deadline filter: {partition_counts(survivors, eliminated)}", severity),
            ),
        )

    @staticmethod
    def remaining_days(candidate: Candidate, now: pendulum.DateTime) -> float | None:
        """Fractional days until the deadline, or None when no deadline is known."""
        if candidate.deadline is None:
            return None
        deadline = pendulum.instance(candidate.deadline)
        return (deadline - now).total_seconds() / SECONDS_PER_DAY
