"""Filter a package's asset declarations against the root configuration and the filesystem."""

from ..config.join_relative import join_relative
from ..config.RootConfig import RootConfig
from ..log.Reporter import Reporter
from .EntryResult import EntryResult
from .EntryStatus import EntryStatus
from .PackageAssetDeclaration import PackageAssetDeclaration
from .ValidatedEntry import ValidatedEntry


def validate_entries(
    declaration: PackageAssetDeclaration,
    config: RootConfig,
    reporter: Reporter,
) -> tuple[list[ValidatedEntry], list[EntryResult]]:
    """Split declared entries into validated entries and rejected results.

    Entries are checked in declared order and every entry is checked, so the
    warnings come out in the same order on every run.

    Returns:
        Tuple of (validated entries, rejected entry results)
    """
    package_name = declaration.package_name
    validated: list[ValidatedEntry] = []
    rejected: list[EntryResult] = []

    for namespace, source_dir in declaration.entries.items():
        target_dir = config.target_dir(namespace)
        if target_dir is None:
            reporter.warning(f"{package_name}: namespace not defined in root package '{namespace}'")
            rejected.append(EntryResult(package_name, namespace, source_dir, EntryStatus.NAMESPACE_UNDEFINED))
            continue

        source_path = join_relative(declaration.install_path, source_dir)
        if not source_path.is_dir():
            reporter.warning(f"{package_name}: asset directory does not exist '{source_dir}'")
            rejected.append(
                EntryResult(package_name, namespace, source_dir, EntryStatus.SOURCE_MISSING, source_path=source_path)
            )
            continue

        validated.append(
            ValidatedEntry(
                package_name=package_name,
                namespace=namespace,
                source_dir=source_dir,
                source_path=source_path,
                target_path=join_relative(target_dir, package_name),
            )
        )

    return validated, rejected
