"""Aggregated outcome of one install call."""

from dataclasses import dataclass, field

from ..log.Reporter import ReportedMessage
from ..log.Severity import Severity
from .EntryResult import EntryResult
from .EntryStatus import EntryStatus


@dataclass
class InstallReport:
    package_name: str = ""
    results: list[EntryResult] = field(default_factory=list)
    unsupported: bool = False
    messages: list[ReportedMessage] = field(default_factory=list)

    def count(self, *statuses: EntryStatus) -> int:
        return sum(1 for r in self.results if r.status in statuses)

    @property
    def linked(self) -> int:
        return self.count(EntryStatus.LINKED)

    @property
    def unchanged(self) -> int:
        return self.count(EntryStatus.UNCHANGED)

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.results if r.status.is_rejected)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.status.is_failure)

    @property
    def success(self) -> bool:
        """No ERROR was reported. Rejected entries only produce warnings."""
        return not any(m.severity is Severity.ERROR for m in self.messages)
