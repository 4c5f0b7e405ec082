"""Aggregated outcome of one cleanup call."""

from dataclasses import dataclass, field
from pathlib import Path

from ..log.Reporter import ReportedMessage
from ..log.Severity import Severity


@dataclass
class SweepReport:
    scanned: list[Path] = field(default_factory=list)
    removed: list[Path] = field(default_factory=list)
    failed: list[Path] = field(default_factory=list)
    messages: list[ReportedMessage] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not any(m.severity is Severity.ERROR for m in self.messages)
