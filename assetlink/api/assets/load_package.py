"""Build a Package from an install directory."""

from pathlib import Path

from ...constants import MANIFEST_FILENAME
from ..config.normalize_path import normalize_path
from ..config.read_manifest import read_manifest
from .Package import Package


def load_package(install_path: str | Path, name: str | None = None) -> Package:
    """Read ``manifest.json`` from ``install_path`` and describe the package.

    A package without a manifest is accepted when ``name`` is given; it simply
    declares no assets.

    Raises:
        ValueError: If the install path is not a directory, the manifest is invalid,
            or no package name is available
    """
    path = normalize_path(install_path)
    if not path.is_dir():
        raise ValueError(f"Install path is not a directory: {path}")

    manifest_path = path / MANIFEST_FILENAME
    if not manifest_path.exists() and name:
        return Package(name=name, install_path=path, extra={})

    manifest = read_manifest(manifest_path)
    package_name = name or manifest.get("name")
    if not isinstance(package_name, str) or not package_name:
        raise ValueError(f"No package name in {manifest_path}; pass one explicitly")

    extra = manifest.get("extra")
    return Package(name=package_name, install_path=path, extra=extra if isinstance(extra, dict) else {})
