"""Show configuration command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import ConfigShowOutput
from .RootConfig import RootConfig


def cmd_show(root: str | None = None) -> StageResult:
    """Show the project root and its namespace directories.

    Args:
        root: Project root, defaults to ASSETLINK_ROOT or the working directory
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        manifest_path = RootConfig.get_manifest_path(root)
        yield (0.3, "Loading configuration...")
        try:
            config = RootConfig.load(root)
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                root_path="",
                manifest_path=str(manifest_path),
                namespaces={},
            ).model_dump(mode="python")
            result_obj.result = f"Configuration error: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        config_dict = config.to_dict()
        warnings = [] if config_dict["namespaces"] else ["No namespaces defined; every package asset will be rejected"]
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=warnings,
            root_path=config_dict["root_path"],
            manifest_path=str(manifest_path),
            namespaces=config_dict["namespaces"],
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(config_dict['namespaces'])} namespace(s)"
        result_obj.success = True

    return StageResult(announce="Showing configuration...", progress_callback=do_work)
