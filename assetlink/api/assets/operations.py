"""Package manager operations that carry a package."""

from dataclasses import dataclass

from .Package import Package


@dataclass(frozen=True)
class InstallOperation:
    package: Package


@dataclass(frozen=True)
class UpdateOperation:
    initial: Package
    target: Package


@dataclass(frozen=True)
class UninstallOperation:
    package: Package


PackageOperation = InstallOperation | UpdateOperation | UninstallOperation
