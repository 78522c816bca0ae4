"""Stage contract."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ..models import StageOutcome, WorkingSet


@runtime_checkable
class Stage(Protocol):
    """Elimination stage contract."""

    name: str

    def apply(self, working: WorkingSet) -> StageOutcome:
        """Partition the working set into survivors and eliminations."""


def partition_counts(survivors: Sequence[object], eliminated: Sequence[object]) -> str:
    return f"{len(survivors)} passed, {len(eliminated)} eliminated"
