"""Assets cleanup API command.

CLI: assetlink assets cleanup [--root <dir>]
"""

from collections.abc import Iterator

from ..config.RootConfig import RootConfig
from ..log.build_reporter import build_reporter
from ..log.Reporter import Reporter
from ..StageResult import StageResult
from . import AssetsCleanupOutput
from .cleanup import cleanup


def cmd_cleanup(root: str | None = None) -> StageResult:
    """Remove dangling asset links from every namespace directory."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = RootConfig.load(root)
        except ValueError as e:
            result_obj.output = AssetsCleanupOutput(
                errors=[str(e)],
                warnings=[],
                scanned=[],
                removed=[],
                failed=[],
                messages=[],
            ).model_dump(mode="python")
            result_obj.result = f"Configuration error: {e}"
            result_obj.success = False
            return

        yield (0.3, f"Sweeping {len(config.namespaces.namespaces)} namespace directories...")
        report = cleanup(config, build_reporter())

        yield (1.0, "Complete")
        messages = Reporter(messages=list(report.messages))
        result_obj.output = AssetsCleanupOutput(
            errors=messages.errors,
            warnings=messages.warnings,
            scanned=[str(p) for p in report.scanned],
            removed=[str(p) for p in report.removed],
            failed=[str(p) for p in report.failed],
            messages=Reporter.to_dicts(report.messages),
        ).model_dump(mode="python")
        result_obj.result = f"Removed {len(report.removed)} unresolved links"
        result_obj.success = report.success

    return StageResult(announce="Cleaning asset directories...", progress_callback=do_work)
