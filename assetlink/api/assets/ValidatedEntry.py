"""An asset entry that passed validation."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ValidatedEntry:
    package_name: str
    namespace: str
    source_dir: str
    source_path: Path
    target_path: Path
