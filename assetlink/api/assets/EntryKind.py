"""Kind of a filesystem entry visited during a tree walk."""

from enum import Enum


class EntryKind(str, Enum):
    SYMLINK = "symlink"
    DIRECTORY = "directory"
    OTHER = "other"
