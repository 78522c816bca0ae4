"""File-based screening run: load requests, drive the controller, persist the snapshot."""

from __future__ import annotations

import asyncio
import json
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Any

import pendulum
import structlog
from pydantic import BaseModel, ValidationError

from . import __version__
from .core import LogEvent, PhaseController, PipelineSnapshot, SpeedProfile
from .schemas import Candidate


class CandidateLoadError(ValueError):
    """Raised when candidate loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[Candidate]):
        super().__init__("Candidate loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Candidate loading failed: {self.errors}"


class CandidateLoader:
    """Load procurement requests from a JSONL file."""

    def load(self, path: Path) -> list[Candidate]:
        candidates: list[Candidate] = []
        errors: list[str] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                if not isinstance(record, dict):
                    errors.append(f"line {idx}: expected a JSON object")
                    continue
                try:
                    candidate = Candidate.model_validate(record.get("payload", record))
                except ValidationError as exc:
                    errors.append(f"line {idx}: {exc.errors()[0]['msg']} ({exc.error_count()} errors)")
                    continue
                candidates.append(candidate)
        if errors:
            raise CandidateLoadError(errors, candidates)
        return candidates


class OutputWriter:
    """Persist run results."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class AuditLogger:
    """Append-only audit logger writing one JSON line per pipeline event."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False, default=_json_default))
            handle.write("\n")

    def __call__(self, event: LogEvent) -> None:
        self.append(asdict(event))


class ScreeningPipeline:
    """End-to-end run over a candidates file."""

    def __init__(
        self,
        *,
        controller: PhaseController,
        candidate_loader: CandidateLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._controller = controller
        self._candidates = candidate_loader or CandidateLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    @property
    def controller(self) -> PhaseController:
        return self._controller

    def run(
        self,
        *,
        candidates_path: Path,
        output_path: Path,
        speed_profile: SpeedProfile | str = SpeedProfile.REALISTIC,
        audit_logger: AuditLogger | None = None,
    ) -> PipelineSnapshot:
        return asyncio.run(
            self.execute(
                candidates_path=candidates_path,
                output_path=output_path,
                speed_profile=speed_profile,
                audit_logger=audit_logger,
            )
        )

    async def execute(
        self,
        *,
        candidates_path: Path,
        output_path: Path,
        speed_profile: SpeedProfile | str = SpeedProfile.REALISTIC,
        audit_logger: AuditLogger | None = None,
    ) -> PipelineSnapshot:
        load_errors: list[str] = []
        try:
            candidates = self._candidates.load(candidates_path)
        except CandidateLoadError as exc:
            candidates = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("candidates.partial_load", errors=exc.errors)

        unsubscribe = self._controller.subscribe(audit_logger) if audit_logger else None
        try:
            await self._controller.run(candidates, speed_profile)
        finally:
            if unsubscribe is not None:
                unsubscribe()

        snapshot = self._controller.get_snapshot()
        metadata = {
            "candidate_count": len(candidates),
            "errors": load_errors,
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        self._writer.write(
            output_path,
            {"metadata": metadata, "snapshot": serialize_snapshot(snapshot)},
        )
        self._logger.info(
            "screening.result",
            phase=snapshot.phase.value,
            steps=len(snapshot.step_history),
            selected=(
                snapshot.final_selection.candidate.candidate_id
                if snapshot.final_selection
                else None
            ),
        )
        return snapshot


def serialize_snapshot(snapshot: PipelineSnapshot) -> dict[str, Any]:
    """Convert a snapshot into plain JSON-compatible data."""
    return json.loads(json.dumps(asdict(snapshot), default=_json_default, ensure_ascii=False))


def _json_default(value):  # type: ignore[override]
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, datetime):
        return pendulum.instance(value).to_iso8601_string()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
