from typing import Any

from ..log.Reporter import Reporter
from . import AssetsInstallOutput
from .InstallReport import InstallReport


def _install_output(report: InstallReport) -> dict[str, Any]:
    """Build install/update command output from a report."""
    reporter = Reporter(messages=list(report.messages))
    return AssetsInstallOutput(
        errors=reporter.errors,
        warnings=reporter.warnings,
        package=report.package_name,
        entries=[r.to_dict() for r in report.results],
        linked=report.linked,
        unchanged=report.unchanged,
        skipped=report.skipped,
        failed=report.failed,
        messages=Reporter.to_dicts(report.messages),
    ).model_dump(mode="python")


def _install_error_output(package: str, error: str) -> dict[str, Any]:
    """Build install/update command output when the call never reached the package."""
    return AssetsInstallOutput(
        errors=[error],
        warnings=[],
        package=package,
        entries=[],
        linked=0,
        unchanged=0,
        skipped=0,
        failed=0,
        messages=[],
    ).model_dump(mode="python")


def _install_summary(report: InstallReport) -> str:
    if report.unsupported:
        return "Unsupported package operation"
    summary = f"{report.package_name}: {report.linked} linked, {report.unchanged} unchanged"
    if report.skipped:
        summary += f", {report.skipped} skipped"
    if report.failed or not report.success:
        summary += f", {report.failed} failed"
    return summary
