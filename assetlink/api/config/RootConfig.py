"""Root project configuration."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from ...constants import ASSETLINK_HOME_EXT, MANIFEST_FILENAME
from .extra_section import extra_section
from .join_relative import join_relative
from .NamespaceConfig import NamespaceConfig
from .read_manifest import read_manifest


class RootConfig(BaseModel):
    """Immutable configuration of one run: where the project lives and its namespaces.

    Built once and passed explicitly into every install, uninstall and
    cleanup call.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    root_path: Path
    namespaces: NamespaceConfig

    @classmethod
    def get_root_dir(cls) -> Path:
        """Get project root from ASSETLINK_ROOT or default to the working directory."""
        root_env = os.environ.get("ASSETLINK_ROOT")
        if root_env:
            return Path(root_env).expanduser().resolve()
        return Path.cwd().resolve()

    @classmethod
    def get_manifest_path(cls, root: str | Path | None = None) -> Path:
        """Get path to the root manifest."""
        root_dir = Path(root).expanduser().resolve() if root else cls.get_root_dir()
        return root_dir / MANIFEST_FILENAME

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get assetlink home directory based on ASSETLINK_HOME or default to ~/.assetlink."""
        home_env = os.environ.get("ASSETLINK_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ASSETLINK_HOME_EXT

    @classmethod
    def get_logfile_path(cls) -> Path:
        """Get path to the logfile."""
        return cls.get_home_dir() / "logfile"

    @classmethod
    def from_manifest(cls, manifest: Mapping[str, Any], root_path: Path) -> "RootConfig":
        """Build from a decoded root manifest.

        Raises:
            ValueError: If the target declaration has the wrong shape
        """
        target = extra_section(manifest.get("extra")).get("target")
        try:
            return cls(root_path=root_path, namespaces=NamespaceConfig.from_target(target))
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    @classmethod
    def load(cls, root: str | Path | None = None) -> "RootConfig":
        """Load and validate configuration from the root manifest.

        Raises:
            ValueError: If the manifest is missing, invalid JSON, or fails validation
        """
        path = cls.get_manifest_path(root)
        manifest = read_manifest(path)
        return cls.from_manifest(manifest, path.parent.resolve())

    def target_dir(self, namespace: str) -> Path | None:
        """Absolute target directory of a namespace, or None if it is not defined."""
        relative = self.namespaces.resolve(namespace)
        if relative is None:
            return None
        return join_relative(self.root_path, relative)

    def namespace_dirs(self) -> list[tuple[str, Path]]:
        """All (namespace, absolute target directory) pairs in declared order."""
        return [
            (namespace, join_relative(self.root_path, relative)) for namespace, relative in self.namespaces.items()
        ]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for display."""
        return {
            "root_path": str(self.root_path),
            "namespaces": dict(self.namespaces.namespaces),
        }
