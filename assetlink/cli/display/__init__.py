"""Display utilities for the CLI."""

from .CLIDisplay import CLIDisplay
from .Display import Display
from .display_sink import display_sink

__all__ = ["CLIDisplay", "Display", "display_sink"]
