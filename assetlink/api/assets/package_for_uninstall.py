"""Pick the package an uninstall operation refers to."""

from .operations import PackageOperation, UninstallOperation
from .Package import Package
from .UnsupportedOperationError import UnsupportedOperationError


def package_for_uninstall(operation: PackageOperation) -> Package:
    """Return the removed package.

    Raises:
        UnsupportedOperationError: For any other operation
    """
    match operation:
        case UninstallOperation(package=package):
            return package
        case _:
            raise UnsupportedOperationError(operation, "uninstall")
