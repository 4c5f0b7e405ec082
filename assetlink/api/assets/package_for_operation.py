"""Pick the package an install or update operation refers to."""

from .operations import InstallOperation, PackageOperation, UpdateOperation
from .Package import Package
from .UnsupportedOperationError import UnsupportedOperationError


def package_for_operation(operation: PackageOperation) -> Package:
    """Return the installed package, or the target package of an update.

    Raises:
        UnsupportedOperationError: For any other operation
    """
    match operation:
        case InstallOperation(package=package):
            return package
        case UpdateOperation(target=package):
            return package
        case _:
            raise UnsupportedOperationError(operation, "install")
