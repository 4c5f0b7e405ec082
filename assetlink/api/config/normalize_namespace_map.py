"""Normalize a "target" or "source" value into a namespace mapping."""

from collections.abc import Mapping
from typing import Any

from ...constants import DEFAULT_NAMESPACE


def _is_path_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def normalize_namespace_map(value: Any) -> dict[str, str]:
    """Turn a single path or a namespace mapping into a namespace -> path dict.

    A single path belongs to the default ``assets`` namespace. ``None`` means
    nothing was declared. Mapping order is kept. Numbers are taken as paths
    both on their own and as mapping values.

    Raises:
        ValueError: If the value is neither a path nor a mapping of paths
    """
    if value is None:
        return {}
    if _is_path_scalar(value):
        return {DEFAULT_NAMESPACE: str(value)}
    if isinstance(value, Mapping):
        normalized: dict[str, str] = {}
        for namespace, path in value.items():
            if not _is_path_scalar(path):
                raise ValueError(f"path for namespace '{namespace}' must be a string, got {type(path).__name__}")
            normalized[str(namespace)] = str(path)
        return normalized
    raise ValueError(f"expected a path or a mapping of namespace to path, got {type(value).__name__}")
