"""Asset declarations of one package."""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from .Package import Package
from .parse_asset_spec import parse_asset_spec


@dataclass(frozen=True)
class PackageAssetDeclaration:
    package_name: str
    install_path: Path
    entries: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    @classmethod
    def from_package(cls, package: Package) -> "PackageAssetDeclaration":
        """Build from a package's metadata.

        Raises:
            ValueError: If the package's source declaration has the wrong shape
        """
        return cls(
            package_name=package.name,
            install_path=package.install_path,
            entries=parse_asset_spec(package.extra),
        )
