"""Pipeline exception hierarchy."""

from __future__ import annotations


class PipelineError(Exception):
    """Base class for pipeline failures."""


class RunRejectedError(PipelineError):
    """Raised when a run request is refused before any state changes."""

    def __init__(self, reason: str, *, record: bool = True):
        super().__init__(reason)
        self.reason = reason
        self.record = record


class StageExecutionError(PipelineError):
    """Wraps an unexpected failure raised while a phase was executing."""

    def __init__(self, phase: str, original: BaseException):
        super().__init__(str(original) or type(original).__name__)
        self.phase = phase
        self.original = original


class InvalidTransitionError(PipelineError):
    """Raised when the controller attempts a transition outside the table."""


class PartitionError(PipelineError):
    """Raised when a stage drops or duplicates candidates."""
