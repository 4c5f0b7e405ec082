"""List the asset links found in the namespace directories."""

import os

from ..config.RootConfig import RootConfig
from .iter_symlinks import iter_symlinks
from .LinkState import LinkState


def link_status(config: RootConfig) -> list[LinkState]:
    """Describe every symlink under the configured namespace directories. Read only."""
    states: list[LinkState] = []
    for namespace, target_dir in config.namespace_dirs():
        if not target_dir.is_dir():
            continue
        for link in iter_symlinks(target_dir):
            try:
                target = os.readlink(link)
            except OSError:
                target = ""
            states.append(LinkState(namespace=namespace, path=link, target=target, resolved=os.path.exists(link)))
    return states
