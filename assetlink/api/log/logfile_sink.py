"""Reporter sink that appends to the logfile."""

from collections.abc import Callable
from pathlib import Path

from ...constants import LOG_DOMAIN
from .append_log import append_log
from .Severity import Severity


def logfile_sink(log_path: Path, domain: str = LOG_DOMAIN) -> Callable[[Severity, str], None]:
    """Create a sink writing ``[TIMESTAMP] [domain] LEVEL: message`` lines to ``log_path``."""

    def sink(severity: Severity, message: str) -> None:
        append_log(log_path, domain, severity.log_level, message)

    return sink
