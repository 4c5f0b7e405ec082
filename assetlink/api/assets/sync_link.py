"""Create or repair the symlink of one validated entry."""

import os

from ..log.Reporter import Reporter
from .EntryResult import EntryResult
from .EntryStatus import EntryStatus
from .ValidatedEntry import ValidatedEntry


def _result(entry: ValidatedEntry, status: EntryStatus, detail: str = "") -> EntryResult:
    return EntryResult(
        package_name=entry.package_name,
        namespace=entry.namespace,
        source_dir=entry.source_dir,
        status=status,
        source_path=entry.source_path,
        target_path=entry.target_path,
        detail=detail,
    )


def sync_link(entry: ValidatedEntry, reporter: Reporter) -> EntryResult:
    """Make ``entry.target_path`` a symlink to ``entry.source_path``.

    Failures are reported as errors and returned as the entry's status; nothing
    is raised, so the caller can go on with the next entry.
    """
    package_name = entry.package_name
    source_path = entry.source_path
    target_path = entry.target_path
    target_dir = target_path.parent

    if not target_dir.is_dir():
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            reporter.error(f"{package_name}: unable to create target directory '{target_dir}'")
            return _result(entry, EntryStatus.DIRECTORY_CREATE_FAILED, str(e))

    reporter.custom(f"Installing asset {package_name}/{entry.source_dir}")

    if target_path.is_symlink():
        try:
            link_path = os.readlink(target_path)
        except OSError:
            link_path = None

        # Only a link that points at itself is left alone; any other link is replaced.
        if link_path == str(target_path):
            return _result(entry, EntryStatus.UNCHANGED)

        try:
            target_path.unlink()
        except OSError as e:
            reporter.error(f"{package_name}: unable to update link to asset '{source_path}' -> '{target_path}'")
            return _result(entry, EntryStatus.LINK_REPLACE_FAILED, str(e))

    try:
        os.symlink(source_path, target_path)
    except OSError as e:
        reporter.error(f"{package_name}: unable to create link to asset '{source_path}' -> '{target_path}'")
        return _result(entry, EntryStatus.LINK_CREATE_FAILED, str(e))

    return _result(entry, EntryStatus.LINKED)
