"""Assets uninstall API command.

CLI: assetlink assets uninstall <name> [--root <dir>]
"""

from collections.abc import Iterator
from pathlib import Path

from ..config.RootConfig import RootConfig
from ..log.build_reporter import build_reporter
from ..log.Reporter import Reporter
from ..StageResult import StageResult
from . import AssetsUninstallOutput
from .operations import UninstallOperation
from .Package import Package
from .uninstall import uninstall


def cmd_uninstall(name: str, root: str | None = None) -> StageResult:
    """Remove the asset links of package ``name``.

    Args:
        name: Package name, e.g. ``vendor/foo``
        root: Project root, defaults to ASSETLINK_ROOT or the working directory
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = RootConfig.load(root)
        except ValueError as e:
            result_obj.output = AssetsUninstallOutput(
                errors=[str(e)],
                warnings=[],
                package=name,
                removed=[],
                failed=[],
                messages=[],
            ).model_dump(mode="python")
            result_obj.result = f"Configuration error: {e}"
            result_obj.success = False
            return

        yield (0.5, f"Removing asset links of {name}...")
        # The install path is unknown once a package is gone; only the name matters here.
        package = Package(name=name, install_path=Path())
        reporter = build_reporter()
        report = uninstall(UninstallOperation(package), config, reporter)

        yield (1.0, "Complete")
        messages = Reporter(messages=list(report.messages))
        result_obj.output = AssetsUninstallOutput(
            errors=messages.errors,
            warnings=messages.warnings,
            package=report.package_name,
            removed=[str(p) for p in report.removed],
            failed=[str(p) for p in report.failed],
            messages=Reporter.to_dicts(report.messages),
        ).model_dump(mode="python")
        link_word = "link" if len(report.removed) == 1 else "links"
        result_obj.result = f"Removed {len(report.removed)} {link_word} of {name}"
        result_obj.success = report.success

    return StageResult(announce=f"Uninstalling assets of {name}...", progress_callback=do_work)
