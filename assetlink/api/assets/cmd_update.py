"""Assets update API command.

CLI: assetlink assets update <path> [--previous <path>] [--name <name>] [--root <dir>]
"""

from collections.abc import Iterator

from ..config.RootConfig import RootConfig
from ..log.build_reporter import build_reporter
from ..StageResult import StageResult
from ._install_output import _install_error_output, _install_output, _install_summary
from .install import install
from .load_package import load_package
from .operations import UpdateOperation


def cmd_update(
    path: str,
    previous: str | None = None,
    name: str | None = None,
    root: str | None = None,
) -> StageResult:
    """Relink the asset directories of a package after an update.

    Args:
        path: Install directory of the updated package
        previous: Install directory before the update, defaults to ``path``
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

        yield (0.3, "Reading package manifests...")
        try:
            target = load_package(path, name)
            initial = load_package(previous, target.name) if previous else target
        except ValueError as e:
            result_obj.output = _install_error_output(name or "", str(e))
            result_obj.result = f"Package error: {e}"
            result_obj.success = False
            return

        yield (0.5, f"Relinking assets of {target.name}...")
        report = install(UpdateOperation(initial=initial, target=target), config, build_reporter())

        yield (1.0, "Complete")
        result_obj.output = _install_output(report)
        result_obj.result = _install_summary(report)
        result_obj.success = report.success

    return StageResult(announce=f"Updating assets from {path}...", progress_callback=do_work)
