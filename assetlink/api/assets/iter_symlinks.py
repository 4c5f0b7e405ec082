"""Walk a directory tree and yield the symlinks in it."""

from collections.abc import Callable, Iterator
from pathlib import Path

from .classify_entry import classify_entry
from .EntryKind import EntryKind


def iter_symlinks(
    directory: Path,
    on_error: Callable[[Path, OSError], None] | None = None,
) -> Iterator[Path]:
    """Yield every symlink beneath ``directory``, depth first, in sorted name order.

    Symlinked directories are yielded, never descended into. A directory that
    cannot be listed is passed to ``on_error`` and skipped.
    """
    try:
        children = sorted(directory.iterdir())
    except OSError as e:
        if on_error is not None:
            on_error(directory, e)
        return

    for child in children:
        kind = classify_entry(child)
        if kind is EntryKind.SYMLINK:
            yield child
        elif kind is EntryKind.DIRECTORY:
            yield from iter_symlinks(child, on_error)
