"""Severity enum for reported messages."""

from enum import Enum


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CUSTOM = "custom"  # raw line, printed without decoration

    @property
    def log_level(self) -> str:
        """Level name used in logfile entries."""
        return {
            Severity.INFO: "INFO",
            Severity.WARNING: "WARN",
            Severity.ERROR: "ERROR",
            Severity.CUSTOM: "INFO",
        }[self]
