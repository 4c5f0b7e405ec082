"""Output schemas for assets commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class AssetsInstallOutput(BaseOutputSchema):
    """Output schema for assets install and update commands.

    Output structure:
    - errors: list[str] - ERROR messages reported during the call
    - warnings: list[str] - WARNING messages reported during the call
    - package: str - package name, empty string if the operation was unsupported
    - entries: list[dict] - one record per declared entry, in declared order
    - linked: int - entries whose link was (re)created
    - unchanged: int - entries left untouched
    - skipped: int - entries rejected by validation
    - failed: int - entries whose filesystem update failed
    - messages: list[dict] - every reported message with its severity
    """

    package: str = Field(..., description="Package name, empty string if the operation was unsupported")
    entries: list[dict[str, Any]] = Field(..., description="Per-entry outcomes in declared order")
    linked: int = Field(..., description="Number of links created or replaced")
    unchanged: int = Field(..., description="Number of links left untouched")
    skipped: int = Field(..., description="Number of entries rejected by validation")
    failed: int = Field(..., description="Number of entries whose filesystem update failed")
    messages: list[dict[str, str]] = Field(..., description="Reported messages with severity")


class AssetsUpdateOutput(AssetsInstallOutput):
    """Output schema for assets update command (same shape as install)."""


class AssetsUninstallOutput(BaseOutputSchema):
    """Output schema for assets uninstall command."""

    package: str = Field(..., description="Package name, empty string if the operation was unsupported")
    removed: list[str] = Field(..., description="Link paths removed")
    failed: list[str] = Field(..., description="Link paths that could not be removed")
    messages: list[dict[str, str]] = Field(..., description="Reported messages with severity")


class AssetsCleanupOutput(BaseOutputSchema):
    """Output schema for assets cleanup command."""

    scanned: list[str] = Field(..., description="Namespace directories that were walked")
    removed: list[str] = Field(..., description="Dangling links removed")
    failed: list[str] = Field(..., description="Dangling links that could not be removed")
    messages: list[dict[str, str]] = Field(..., description="Reported messages with severity")


class AssetsStatusOutput(BaseOutputSchema):
    """Output schema for assets status command."""

    links: list[dict[str, Any]] = Field(..., description="Every symlink found under the namespace directories")
    total: int = Field(..., description="Number of symlinks found")
    broken: int = Field(..., description="Number of symlinks that do not resolve")


register_output_schema("assets", "install", AssetsInstallOutput)
register_output_schema("assets", "update", AssetsUpdateOutput)
register_output_schema("assets", "uninstall", AssetsUninstallOutput)
register_output_schema("assets", "cleanup", AssetsCleanupOutput)
register_output_schema("assets", "status", AssetsStatusOutput)
