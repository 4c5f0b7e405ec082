"""Leveled message sink shared by install, uninstall and cleanup."""

from collections.abc import Callable, Iterable
from contextlib import suppress
from dataclasses import dataclass, field

from .Severity import Severity

Sink = Callable[[Severity, str], None]


@dataclass(frozen=True)
class ReportedMessage:
    severity: Severity
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"severity": self.severity.value, "message": self.message}


@dataclass
class Reporter:
    """Records every message in order and forwards it to the sinks.

    Reporting never fails the calling operation: a sink that raises is skipped.
    """

    sinks: list[Sink] = field(default_factory=list)
    messages: list[ReportedMessage] = field(default_factory=list)

    def log(self, severity: Severity, message: str) -> None:
        self.messages.append(ReportedMessage(severity, message))
        for sink in self.sinks:
            with suppress(Exception):
                sink(severity, message)

    def info(self, message: str) -> None:
        self.log(Severity.INFO, message)

    def warning(self, message: str) -> None:
        self.log(Severity.WARNING, message)

    def error(self, message: str) -> None:
        self.log(Severity.ERROR, message)

    def custom(self, message: str) -> None:
        self.log(Severity.CUSTOM, message)

    def of(self, *severities: Severity) -> list[str]:
        """Messages with one of the given severities, in reporting order."""
        return [m.message for m in self.messages if m.severity in severities]

    @property
    def errors(self) -> list[str]:
        return self.of(Severity.ERROR)

    @property
    def warnings(self) -> list[str]:
        return self.of(Severity.WARNING)

    def since(self, start: int) -> list[ReportedMessage]:
        """Messages reported after the first ``start`` ones."""
        return self.messages[start:]

    @staticmethod
    def to_dicts(messages: Iterable[ReportedMessage]) -> list[dict[str, str]]:
        return [m.to_dict() for m in messages]
