"""Aggregated outcome of one uninstall call."""

from dataclasses import dataclass, field
from pathlib import Path

from ..log.Reporter import ReportedMessage
from ..log.Severity import Severity


@dataclass
class UninstallReport:
    package_name: str = ""
    removed: list[Path] = field(default_factory=list)
    failed: list[Path] = field(default_factory=list)
    unsupported: bool = False
    messages: list[ReportedMessage] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not any(m.severity is Severity.ERROR for m in self.messages)
