"""Phase state machine driving one pipeline execution at a time."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence, Union

import structlog
from pydantic import ValidationError

from ..schemas import Candidate
from .assembly import FinalSelection, PricedCandidate, ResultAssembler
from .elimination import EliminationPipeline
from .events import EventListener, EventLog, LogEvent
from .exceptions import InvalidTransitionError, RunRejectedError, StageExecutionError
from .models import Severity, StageMessage, StepState, WorkingSet
from .pacing import ImmediatePacer, Pacer, SpeedProfile
from .phases import STAGE_PHASES, Phase, next_phase

CandidateRecord = Union[Candidate, Mapping[str, Any]]

_PHASE_START_MESSAGES: dict[Phase, str] = {
    Phase.LOADING: "Automated trigger activated",
    Phase.DEADLINE_FILTER: "Validating deadlines across all candidates...",
    Phase.SPEC_FILTER: "Filtering by specification and compliance...",
    Phase.SCORING: "Scoring remaining candidates against catalog...",
    Phase.SHORTLIST: "Creating final shortlist...",
    Phase.COMPLETED: "Assembling final selection...",
}


@dataclass(frozen=True, slots=True)
class PipelineSnapshot:
    """Read-only view of the controller state."""

    phase: Phase
    step_history: tuple[StepState, ...]
    log: tuple[LogEvent, ...]
    final_selection: FinalSelection | None
    pricing: tuple[PricedCandidate, ...]
    is_running: bool


@dataclass
class _RunContext:
    records: list[CandidateRecord]
    working: WorkingSet = field(default_factory=lambda: WorkingSet(candidates=()))


class PhaseController:
    """Owns the pipeline state and advances it phase by phase.

    ``run`` is a coroutine that suspends only while the pacer waits between
    phases. A second ``run`` issued while one is in flight is ignored.
    """

    def __init__(
        self,
        *,
        pipeline: EliminationPipeline,
        assembler: ResultAssembler | None = None,
        pacer: Pacer | None = None,
        event_log: EventLog | None = None,
    ) -> None:
        if len(pipeline.stages) != len(STAGE_PHASES):
            raise ValueError(
                f"Pipeline must define {len(STAGE_PHASES)} stages, got {len(pipeline.stages)}"
            )
        self._pipeline = pipeline
        self._assembler = assembler or ResultAssembler()
        self._pacer = pacer or ImmediatePacer()
        self._events = event_log or EventLog()
        self._stages = dict(zip(STAGE_PHASES, pipeline.stages))
        self._handlers: dict[Phase, Callable[[_RunContext], list[StageMessage]]] = {
            Phase.LOADING: self._load,
            Phase.DEADLINE_FILTER: self._filter,
            Phase.SPEC_FILTER: self._filter,
            Phase.SCORING: self._filter,
            Phase.SHORTLIST: self._shortlist,
            Phase.COMPLETED: self._complete,
        }
        self._logger = structlog.get_logger(__name__)

        self._phase = Phase.NOT_STARTED
        self._steps: list[StepState] = []
        self._pricing: list[PricedCandidate] = []
        self._final: FinalSelection | None = None
        self._running = False
        self._generation = 0

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def is_running(self) -> bool:
        return self._running

    def subscribe(self, listener: EventListener) -> Callable[[], None]:
        return self._events.subscribe(listener)

    def get_snapshot(self) -> PipelineSnapshot:
        return PipelineSnapshot(
            phase=self._phase,
            step_history=tuple(self._steps),
            log=self._events.entries(),
            final_selection=self._final,
            pricing=tuple(self._pricing),
            is_running=self._running,
        )

    def reset(self) -> None:
        """Return to the initial state; a suspended run stops at its next resume."""
        self._generation += 1
        self._clear()
        self._events.clear()
        self._running = False
        self._logger.info("pipeline.reset")

    async def run(
        self,
        candidates: Sequence[CandidateRecord],
        speed_profile: SpeedProfile | str = SpeedProfile.REALISTIC,
    ) -> None:
        try:
            profile = self._validate(candidates, speed_profile)
        except RunRejectedError as exc:
            self._logger.warning("pipeline.rejected", reason=exc.reason)
            if exc.record:
                self._events.emit(exc.reason, Severity.WARNING)
            return

        # Claim the run before the first suspension point.
        self._running = True
        self._generation += 1
        generation = self._generation
        self._clear()
        self._events.clear()
        self._logger.info("pipeline.started", candidates=len(candidates), speed=profile.value)
        self._events.emit(
            f"Starting pipeline with {len(candidates)} candidates...",
            Severity.SUCCESS,
        )

        context = _RunContext(records=list(candidates))
        try:
            await self._drive(context, profile, generation)
        except Exception as exc:  # noqa: BLE001
            if self._is_current(generation):
                self._fail(exc)
        finally:
            if self._is_current(generation):
                if self._phase is not Phase.COMPLETED:
                    self._phase = Phase.NOT_STARTED
                self._running = False

    async def _drive(self, context: _RunContext, profile: SpeedProfile, generation: int) -> None:
        target = next_phase(self._phase)
        while target is not None:
            self._transition(target)
            self._events.emit(_PHASE_START_MESSAGES[target])
            await self._pacer.pause(target, profile)
            if not self._is_current(generation):
                self._logger.info("pipeline.abandoned", phase=target.value)
                return
            try:
                messages = self._handlers[target](context)
            except Exception as exc:
                raise StageExecutionError(target.value, exc) from exc
            self._events.record(messages)
            target = next_phase(self._phase)

    def _validate(
        self,
        candidates: Sequence[CandidateRecord],
        speed_profile: SpeedProfile | str,
    ) -> SpeedProfile:
        if self._running:
            raise RunRejectedError("Pipeline run already in progress", record=False)
        if not candidates:
            raise RunRejectedError(
                "No candidates available to process. Please load candidates first."
            )
        try:
            return SpeedProfile(speed_profile)
        except ValueError as exc:
            raise RunRejectedError(f"Unknown speed profile: {speed_profile!r}") from exc

    def _transition(self, target: Phase) -> None:
        if next_phase(self._phase) is not target:
            raise InvalidTransitionError(
                f"Cannot move from {self._phase.value} to {target.value}"
            )
        self._logger.debug("pipeline.phase", source=self._phase.value, target=target.value)
        self._phase = target

    def _load(self, context: _RunContext) -> list[StageMessage]:
        loaded: list[Candidate] = []
        skipped: list[StageMessage] = []
        for position, record in enumerate(context.records, start=1):
            if isinstance(record, Candidate):
                loaded.append(record)
                continue
            try:
                loaded.append(Candidate.model_validate(record))
            except ValidationError as exc:
                reason = exc.errors()[0]["msg"]
                self._logger.warning("pipeline.record_skipped", position=position, reason=reason)
                skipped.append(
                    StageMessage(f"Skipped candidate #{position}: {reason}", Severity.WARNING)
                )
        candidates = tuple(loaded)
        context.working = WorkingSet(candidates=candidates)
        self._steps.append(StepState(stage="Initial Load", survivors=candidates))
        return [StageMessage(f"Loaded {len(candidates)} candidates for processing..."), *skipped]

    def _filter(self, context: _RunContext) -> list[StageMessage]:
        outcome = self._pipeline.apply(self._stages[self._phase], context.working)
        context.working = outcome.working
        self._steps.append(outcome.step)
        return list(outcome.messages)

    def _shortlist(self, context: _RunContext) -> list[StageMessage]:
        messages = self._filter(context)
        self._pricing = self._assembler.price_all(context.working.ranking or ())
        messages.append(
            StageMessage(f"Pricing complete for {len(self._pricing)} candidates", Severity.SUCCESS)
        )
        return messages

    def _complete(self, context: _RunContext) -> list[StageMessage]:
        messages = [StageMessage("Workflow completed successfully", Severity.SUCCESS)]
        final = self._assembler.assemble(context.working.ranking or ())
        self._final = final
        if final is not None:
            messages.append(
                StageMessage(
                    f"Final selection: {final.candidate.title} with "
                    f"{final.item.product_name} (Score: {final.match_score}%)",
                    Severity.SUCCESS,
                )
            )
        self._logger.info(
            "pipeline.completed",
            shortlisted=len(context.working.candidates),
            selected=final.candidate.candidate_id if final else None,
        )
        return messages

    def _fail(self, exc: Exception) -> None:
        phase = exc.phase if isinstance(exc, StageExecutionError) else self._phase.value
        cause = exc.original if isinstance(exc, StageExecutionError) else exc
        self._logger.error(
            "pipeline.failed",
            phase=phase,
            error=str(cause),
            error_type=type(cause).__name__,
        )
        self._events.emit(f"Workflow error: {exc}", Severity.ERROR)

    def _clear(self) -> None:
        self._phase = Phase.NOT_STARTED
        self._steps = []
        self._pricing = []
        self._final = None

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation
