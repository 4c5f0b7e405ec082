"""Assets install API command.

CLI: assetlink assets install <path> [--name <name>] [--root <dir>]
"""

from collections.abc import Iterator

from ..config.RootConfig import RootConfig
from ..log.build_reporter import build_reporter
from ..StageResult import StageResult
from ._install_output import _install_error_output, _install_output, _install_summary
from .install import install
from .load_package import load_package
from .operations import InstallOperation


def cmd_install(path: str, name: str | None = None, root: str | None = None) -> StageResult:
    """Link the asset directories of the package installed at ``path``.

    Args:
        path: Install directory of the package
        name: Package name, defaults to the name in the package manifest
        root: Project root, defaults to ASSETLINK_ROOT or the working directory
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = RootConfig.load(root)
        except ValueError as e:
            result_obj.output = _install_error_output(name or "", str(e))
            result_obj.result = f"Configuration error: {e}"
            result_obj.success = False
            return

        yield (0.3, "Reading package manifest...")
        try:
            package = load_package(path, name)
        except ValueError as e:
            result_obj.output = _install_error_output(name or "", str(e))
            result_obj.result = f"Package error: {e}"
            result_obj.success = False
            return

        yield (0.5, f"Linking assets of {package.name}...")
        report = install(InstallOperation(package), config, build_reporter())

        yield (1.0, "Complete")
        result_obj.output = _install_output(report)
        result_obj.result = _install_summary(report)
        result_obj.success = report.success

    return StageResult(announce=f"Installing assets from {path}...", progress_callback=do_work)
