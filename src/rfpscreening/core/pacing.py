"""Simulated per-phase processing delays."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, Callable, Protocol, runtime_checkable

from .phases import Phase


class SpeedProfile(str, Enum):
    REALISTIC = "realistic"
    FAST = "fast"


_DEFAULT_DELAYS: dict[SpeedProfile, dict[str, float]] = {
    SpeedProfile.REALISTIC: {
        Phase.LOADING.value: 2.0,
        Phase.DEADLINE_FILTER.value: 2.5,
        Phase.SPEC_FILTER.value: 1.5,
        Phase.SCORING.value: 2.0,
        Phase.SHORTLIST.value: 2.5,
        Phase.COMPLETED.value: 2.0,
    },
    SpeedProfile.FAST: {
        Phase.LOADING.value: 0.5,
        Phase.DEADLINE_FILTER.value: 0.8,
        Phase.SPEC_FILTER.value: 0.6,
        Phase.SCORING.value: 1.0,
        Phase.SHORTLIST.value: 0.7,
        Phase.COMPLETED.value: 0.5,
    },
}


@dataclass(frozen=True)
class PacingConfig:
    """Per-phase delay overrides in seconds, keyed by phase name."""

    realistic: dict[str, float] = field(default_factory=dict)
    fast: dict[str, float] = field(default_factory=dict)

    def delay_for(self, phase: Phase, profile: SpeedProfile) -> float:
        overrides = self.realistic if profile is SpeedProfile.REALISTIC else self.fast
        if phase.value in overrides:
            return max(float(overrides[phase.value]), 0.0)
        return _DEFAULT_DELAYS[profile].get(phase.value, 0.0)


@runtime_checkable
class Pacer(Protocol):
    """Delay strategy awaited before each phase executes."""

    async def pause(self, phase: Phase, profile: SpeedProfile) -> None:
        """Suspend the run for the configured duration."""


class ProfilePacer:
    """Sleep for the delay the speed profile assigns to each phase."""

    def __init__(
        self,
        *,
        config: PacingConfig | None = None,
        sleep: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        self._config = config or PacingConfig()
        self._sleep = sleep or asyncio.sleep

    async def pause(self, phase: Phase, profile: SpeedProfile) -> None:
        await self._sleep(self._config.delay_for(phase, profile))


class ImmediatePacer:
    """Yield to the event loop without waiting."""

    async def pause(self, phase: Phase, profile: SpeedProfile) -> None:
        await asyncio.sleep(0)
