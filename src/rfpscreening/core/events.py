"""Append-only event log with subscribers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

import pendulum
import structlog

from .models import Severity, StageMessage


@dataclass(frozen=True, slots=True)
class LogEvent:
    timestamp: str
    message: str
    severity: Severity


EventListener = Callable[[LogEvent], None]

_LOG_METHODS: dict[Severity, str] = {
    Severity.INFO: "info",
    Severity.SUCCESS: "info",
    Severity.WARNING: "warning",
    Severity.ERROR: "error",
}


class EventLog:
    """Ordered pipeline events, mirrored to structlog and pushed to listeners."""

    def __init__(self, *, clock: Callable[[], Any] | None = None) -> None:
        self._clock = clock or pendulum.now
        self._entries: list[LogEvent] = []
        self._listeners: list[EventListener] = []
        self._logger = structlog.get_logger(__name__)

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self) -> tuple[LogEvent, ...]:
        return tuple(self._entries)

    def emit(self, message: str, severity: Severity = Severity.INFO) -> LogEvent:
        return self.record([StageMessage(message, severity)])[0]

    def record(self, messages: Iterable[StageMessage]) -> list[LogEvent]:
        """Append a batch of messages in one step, then notify listeners."""
        timestamp = pendulum.instance(self._clock()).to_iso8601_string()
        events = [
            LogEvent(timestamp=timestamp, message=item.message, severity=Severity(item.severity))
            for item in messages
        ]
        self._entries.extend(events)
        for event in events:
            getattr(self._logger, _LOG_METHODS[event.severity])(
                "pipeline.event",
                message=event.message,
                severity=event.severity.value,
            )
            self._notify(event)
        return events

    def clear(self) -> None:
        self._entries.clear()

    def subscribe(self, listener: EventListener) -> Callable[[], None]:
        """Register ``listener``; the returned callable removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: LogEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as exc:  # noqa: BLE001
                self._logger.warning("pipeline.listener_failed", error=str(exc))
