"""Output schemas for config commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command.

    Output structure:
    - errors: list[str] - list of error messages, empty list if no errors
    - warnings: list[str] - list of warning messages, empty list if no warnings
    - root_path: str - resolved project root, empty string if loading failed
    - manifest_path: str - path to the root manifest
    - namespaces: dict[str, str] - namespace -> target directory
    """

    root_path: str = Field(..., description="Resolved project root, empty string if loading failed")
    manifest_path: str = Field(..., description="Path to the root manifest")
    namespaces: dict[str, str] = Field(..., description="Namespace to target directory mapping")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "version", ConfigVersionOutput)
