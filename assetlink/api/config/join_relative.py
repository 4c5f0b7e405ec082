"""Join a declared path onto a base directory."""

from pathlib import Path


def join_relative(base: Path, *parts: str) -> Path:
    """Append ``parts`` to ``base`` as relative segments.

    Leading separators are stripped, so ``join_relative(root, "/x")`` is
    ``root/x``, not ``/x``. The result always starts with ``base``.
    """
    path = base
    for part in parts:
        path = path / part.lstrip("/\\")
    return path
