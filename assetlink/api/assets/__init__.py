"""Assets API domain."""

from .._output_schemas.assets import (
    AssetsCleanupOutput,
    AssetsInstallOutput,
    AssetsStatusOutput,
    AssetsUninstallOutput,
    AssetsUpdateOutput,
)

__all__ = [
    "AssetsCleanupOutput",
    "AssetsInstallOutput",
    "AssetsStatusOutput",
    "AssetsUninstallOutput",
    "AssetsUpdateOutput",
]
