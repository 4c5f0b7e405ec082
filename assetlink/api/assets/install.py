"""Install or update the asset links of one package."""

from ..config.RootConfig import RootConfig
from ..log.Reporter import Reporter
from .InstallReport import InstallReport
from .operations import PackageOperation
from .package_for_operation import package_for_operation
from .PackageAssetDeclaration import PackageAssetDeclaration
from .sync_link import sync_link
from .UnsupportedOperationError import UnsupportedOperationError
from .validate_entries import validate_entries


def install(operation: PackageOperation, config: RootConfig, reporter: Reporter) -> InstallReport:
    """Link the declared asset directories of an installed or updated package.

    Every entry is processed on its own; failures end up in the report and
    in the reporter, never as exceptions.
    """
    start = len(reporter.messages)

    try:
        package = package_for_operation(operation)
    except UnsupportedOperationError:
        reporter.error("Internal error -- unable to handle event operation.")
        return InstallReport(unsupported=True, messages=reporter.since(start))

    report = InstallReport(package_name=package.name)

    try:
        declaration = PackageAssetDeclaration.from_package(package)
    except ValueError as e:
        reporter.error(f"{package.name}: invalid asset declaration: {e}")
        report.messages = reporter.since(start)
        return report

    validated, rejected = validate_entries(declaration, config, reporter)
    results = rejected + [sync_link(entry, reporter) for entry in validated]

    declared_order = list(declaration.entries)
    report.results = sorted(results, key=lambda r: declared_order.index(r.namespace))
    report.messages = reporter.since(start)
    return report
