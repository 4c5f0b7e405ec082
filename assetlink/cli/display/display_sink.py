"""Reporter sink that prints through a Display."""

from collections.abc import Callable

from ...api.log.Severity import Severity
from .Display import Display


def display_sink(display: Display) -> Callable[[Severity, str], None]:
    """Map each severity onto the matching display method; custom lines print undecorated."""

    def sink(severity: Severity, message: str) -> None:
        if severity is Severity.INFO:
            display.status(message)
        elif severity is Severity.WARNING:
            display.warning(message)
        elif severity is Severity.ERROR:
            display.error(message)
        else:
            display.info(f"  - {message}")

    return sink
