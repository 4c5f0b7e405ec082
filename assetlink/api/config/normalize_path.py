"""Normalize a path for assetlink.

Expands user home directory (~) and returns an absolute path
WITHOUT resolving symlinks. Link paths must be kept as they are,
otherwise a symlink would be replaced by the path it points to.
"""

from pathlib import Path
from typing import overload


@overload
def normalize_path(path: str) -> Path: ...


@overload
def normalize_path(path: Path) -> Path: ...


@overload
def normalize_path(path: None) -> None: ...


def normalize_path(path: str | Path | None) -> Path | None:
    """Expand user and return absolute path (no symlink resolution)."""
    if path is None:
        return None
    return Path(path).expanduser().absolute()
