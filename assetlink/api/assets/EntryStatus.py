"""Outcome of processing one declared asset entry."""

from enum import Enum


class EntryStatus(str, Enum):
    LINKED = "linked"
    UNCHANGED = "unchanged"
    NAMESPACE_UNDEFINED = "namespace_undefined"
    SOURCE_MISSING = "source_missing"
    DIRECTORY_CREATE_FAILED = "directory_create_failed"
    LINK_REPLACE_FAILED = "link_replace_failed"
    LINK_CREATE_FAILED = "link_create_failed"

    @property
    def is_rejected(self) -> bool:
        """Dropped by validation, before any filesystem access."""
        return self in (EntryStatus.NAMESPACE_UNDEFINED, EntryStatus.SOURCE_MISSING)

    @property
    def is_failure(self) -> bool:
        """Validated, but the filesystem update failed."""
        return self in (
            EntryStatus.DIRECTORY_CREATE_FAILED,
            EntryStatus.LINK_REPLACE_FAILED,
            EntryStatus.LINK_CREATE_FAILED,
        )
