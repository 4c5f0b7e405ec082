"""Observed state of one asset link."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class LinkState:
    namespace: str
    path: Path
    target: str
    resolved: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "namespace": self.namespace,
            "path": str(self.path),
            "target": self.target,
            "resolved": self.resolved,
        }
