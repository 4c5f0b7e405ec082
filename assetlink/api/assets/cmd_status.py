"""Assets status API command.

CLI: assetlink assets status [--root <dir>]
"""

from collections.abc import Iterator

from ..config.RootConfig import RootConfig
from ..StageResult import StageResult
from . import AssetsStatusOutput
from .link_status import link_status


def cmd_status(root: str | None = None) -> StageResult:
    """List the asset links and whether they resolve."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = RootConfig.load(root)
        except ValueError as e:
            result_obj.output = AssetsStatusOutput(
                errors=[str(e)],
                warnings=[],
                links=[],
                total=0,
                broken=0,
            ).model_dump(mode="python")
            result_obj.result = f"Configuration error: {e}"
            result_obj.success = False
            return

        yield (0.5, "Scanning namespace directories...")
        states = link_status(config)
        broken = [s for s in states if not s.resolved]

        yield (1.0, "Complete")
        result_obj.output = AssetsStatusOutput(
            errors=[],
            warnings=[f"Unresolved link {s.path} -> {s.target}" for s in broken],
            links=[s.to_dict() for s in states],
            total=len(states),
            broken=len(broken),
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(states)} links ({len(broken)} unresolved)"
        result_obj.success = True

    return StageResult(announce="Checking asset links...", progress_callback=do_work)
