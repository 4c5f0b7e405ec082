"""Remove dangling asset links from the namespace directories."""

import os
from pathlib import Path

from ..config.RootConfig import RootConfig
from ..log.Reporter import Reporter
from .iter_symlinks import iter_symlinks
from .SweepReport import SweepReport


def cleanup(config: RootConfig, reporter: Reporter) -> SweepReport:
    """Delete every symlink under a configured namespace directory whose target does not exist.

    Valid links, files and directories are never touched. A link that cannot
    be removed is reported and left in place, and the walk goes on.
    """
    start = len(reporter.messages)
    report = SweepReport()
    reporter.info("Cleanup asset directories")

    def on_error(directory: Path, error: OSError) -> None:
        reporter.error(f"Unable to read directory '{directory}': {error.strerror or error}")

    for _namespace, target_dir in config.namespace_dirs():
        if not target_dir.is_dir():
            continue
        report.scanned.append(target_dir)

        for link in iter_symlinks(target_dir, on_error):
            if os.path.exists(link):
                continue

            try:
                link_target = os.readlink(link)
            except OSError:
                link_target = ""

            reporter.custom(f"Removing unresolved path {link}")
            try:
                link.unlink()
            except OSError:
                reporter.error(f"Unable to remove unresolved path '{link}' -> '{link_target}'")
                report.failed.append(link)
                continue
            report.removed.append(link)

    report.messages = reporter.since(start)
    return report
