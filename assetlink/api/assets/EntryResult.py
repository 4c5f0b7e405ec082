"""Result of processing one declared asset entry."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .EntryStatus import EntryStatus


@dataclass(frozen=True)
class EntryResult:
    package_name: str
    namespace: str
    source_dir: str
    status: EntryStatus
    source_path: Path | None = None
    target_path: Path | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.status in (EntryStatus.LINKED, EntryStatus.UNCHANGED)

    def to_dict(self) -> dict[str, Any]:
        return {
            "namespace": self.namespace,
            "source_dir": self.source_dir,
            "status": self.status.value,
            "source_path": str(self.source_path) if self.source_path else "",
            "target_path": str(self.target_path) if self.target_path else "",
            "detail": self.detail,
        }
