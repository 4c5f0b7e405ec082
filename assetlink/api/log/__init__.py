"""Log module - leveled reporting for asset operations."""

from .Reporter import ReportedMessage, Reporter
from .Severity import Severity

__all__ = ["ReportedMessage", "Reporter", "Severity"]
