"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _extract_display_format(ctx: typer.Context | None) -> str:
    """Get the display format stored by the root callback in the context chain.

    Raises:
        RuntimeError: If no context is given or the flag was never set.
        ValueError: If an invalid display format value is encountered.
    """
    if ctx is None:
        raise RuntimeError("Display format unavailable: Typer context is missing")

    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in ("json", "yaml"):
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent

    raise RuntimeError("Display format not set in the Typer context chain")


def _handle_stage_result(
    func: F,
    ctx: typer.Context | None = None,
    result_printer: Callable[[dict], None] | None = None,
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout, YAML or JSON)

    ``ctx`` is the invoking command's context; without one, or when the
    sub-app runs on its own, output is YAML.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display = CLIDisplay()

        try:
            display_format = _extract_display_format(ctx)
        except (RuntimeError, ValueError):
            display_format = "yaml"

        _run_single_execution(func, args, kwargs, display, display_format, result_printer)

    return wrapper  # type: ignore[return-value]
