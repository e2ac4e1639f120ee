"""Diagnostic sinks for non-fatal warnings and errors.

Query and fetch code never writes to a global logger directly; it
reports through a sink passed in by the caller. The default sink
forwards to the standard logging module.
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticSink(Protocol):
    """
    Contract for diagnostic receivers.

    Contract:
        - MUST NOT raise
        - MUST NOT alter the outcome of the operation reporting to it
    """

    def warning(self, message: str) -> None:
        """Record a non-fatal, expected condition (e.g. unknown language)."""
        ...

    def error(self, message: str, error: Exception | None = None) -> None:
        """Record a failure that was converted into a failed result."""
        ...


class LoggingDiagnostics:
    """Sink that forwards diagnostics to a logging.Logger."""

    def __init__(self, target: logging.Logger | None = None):
        self.logger = target or logger

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str, error: Exception | None = None) -> None:
        if error is not None:
            self.logger.error(f"{message}: {error}")
        else:
            self.logger.error(message)


@dataclass
class DiagnosticRecord:
    """A single captured diagnostic."""

    level: str
    message: str
    error: Exception | None = None


@dataclass
class RecordingDiagnostics:
    """Sink that keeps diagnostics in memory.

    Useful for UIs that surface warnings to the user, and for tests.
    """

    records: list[DiagnosticRecord] = field(default_factory=list)

    def warning(self, message: str) -> None:
        self.records.append(DiagnosticRecord("warning", message))

    def error(self, message: str, error: Exception | None = None) -> None:
        self.records.append(DiagnosticRecord("error", message, error))

    @property
    def warnings(self) -> list[str]:
        return [r.message for r in self.records if r.level == "warning"]

    @property
    def errors(self) -> list[str]:
        return [r.message for r in self.records if r.level == "error"]

    def clear(self) -> None:
        self.records.clear()


def resolve_sink(diagnostics: DiagnosticSink | None) -> DiagnosticSink:
    """Return the given sink, or the logging sink when none is supplied."""
    return diagnostics if diagnostics is not None else LoggingDiagnostics()
