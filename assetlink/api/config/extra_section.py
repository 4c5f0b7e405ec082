"""Extract the assetlink section from a manifest's "extra" field."""

from collections.abc import Mapping
from typing import Any

from ...constants import EXTRA_KEY


def extra_section(extra: Mapping[str, Any] | None) -> Mapping[str, Any]:
    """Return the ``extra["assetlink"]`` mapping, or an empty mapping if absent."""
    if not extra:
        return {}
    section = extra.get(EXTRA_KEY)
    if not isinstance(section, Mapping):
        return {}
    return section
