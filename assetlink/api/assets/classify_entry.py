from pathlib import Path

from .EntryKind import EntryKind


def classify_entry(path: Path) -> EntryKind:
    """Classify a path without following it if it is a symlink."""
    if path.is_symlink():
        return EntryKind.SYMLINK
    if path.is_dir():
        return EntryKind.DIRECTORY
    return EntryKind.OTHER
