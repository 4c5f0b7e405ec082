"""Resolved package descriptor."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class Package:
    """A package as handed over by the package manager: name, install path and extra metadata."""

    name: str
    install_path: Path
    extra: Mapping[str, Any] = field(default_factory=dict)
