"""Extract a package's asset declarations from its metadata."""

from collections.abc import Mapping
from typing import Any

from ..config.extra_section import extra_section
from ..config.normalize_namespace_map import normalize_namespace_map


def parse_asset_spec(extra: Mapping[str, Any] | None) -> dict[str, str]:
    """Return namespace -> source directory declared under ``extra["assetlink"]["source"]``.

    A single path is declared for the ``assets`` namespace. No filesystem access.

    Raises:
        ValueError: If ``source`` is neither a path nor a mapping of paths
    """
    return normalize_namespace_map(extra_section(extra).get("source"))
