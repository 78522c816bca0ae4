"""Pipeline phases and their transition table."""

from __future__ import annotations

from enum import Enum


class Phase(str, Enum):
    NOT_STARTED = "NOT_STARTED"
    LOADING = "LOADING"
    DEADLINE_FILTER = "DEADLINE_FILTER"
    SPEC_FILTER = "SPEC_FILTER"
    SCORING = "SCORING"
    SHORTLIST = "SHORTLIST"
    COMPLETED = "COMPLETED"


TRANSITIONS: dict[Phase, Phase] = {
    Phase.NOT_STARTED: Phase.LOADING,
    Phase.LOADING: Phase.DEADLINE_FILTER,
    Phase.DEADLINE_FILTER: Phase.SPEC_FILTER,
    Phase.SPEC_FILTER: Phase.SCORING,
    Phase.SCORING: Phase.SHORTLIST,
    Phase.SHORTLIST: Phase.COMPLETED,
}

# Phases backed by an elimination stage, in pipeline order.
STAGE_PHASES: tuple[Phase, ...] = (
    Phase.DEADLINE_FILTER,
    Phase.SPEC_FILTER,
    Phase.SCORING,
    Phase.SHORTLIST,
)


def next_phase(phase: Phase) -> Phase | None:
    return TRANSITIONS.get(phase)
