"""Remove the asset links of an uninstalled package."""

from ..config.join_relative import join_relative
from ..config.RootConfig import RootConfig
from ..log.Reporter import Reporter
from .operations import PackageOperation
from .package_for_uninstall import package_for_uninstall
from .UninstallReport import UninstallReport
from .UnsupportedOperationError import UnsupportedOperationError


def uninstall(operation: PackageOperation, config: RootConfig, reporter: Reporter) -> UninstallReport:
    """Remove ``<namespace dir>/<package name>`` in every namespace where it is a symlink.

    Anything that is not a symlink is left alone.
    """
    start = len(reporter.messages)

    try:
        package = package_for_uninstall(operation)
    except UnsupportedOperationError:
        reporter.error("Internal error -- unable to handle event operation.")
        return UninstallReport(unsupported=True, messages=reporter.since(start))

    package_name = package.name
    report = UninstallReport(package_name=package_name)

    for namespace, target_dir in config.namespace_dirs():
        target_path = join_relative(target_dir, package_name)
        if not target_path.is_symlink():
            continue

        reporter.custom(f"Removing asset {package_name}/{namespace}")
        try:
            target_path.unlink()
        except OSError:
            reporter.error(f"{package_name}: unable to remove link to asset '{target_path}'")
            report.failed.append(target_path)
            continue
        report.removed.append(target_path)

    report.messages = reporter.since(start)
    return report
