"""Namespace to target-directory mapping of the root project."""

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .normalize_namespace_map import normalize_namespace_map


class NamespaceConfig(BaseModel):
    """Namespaces declared by the root project.

    Each namespace maps to a directory relative to the project root. An empty
    mapping is valid and rejects every package entry.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    namespaces: dict[str, str] = Field(default_factory=dict, description="Namespace -> relative target directory")

    @field_validator("namespaces", mode="before")
    @classmethod
    def _normalize(cls, v: Any) -> dict[str, str]:
        return normalize_namespace_map(v)

    @classmethod
    def from_target(cls, target: Any) -> "NamespaceConfig":
        """Build from a ``target`` value: a single path or a namespace mapping."""
        return cls(namespaces=target)

    def resolve(self, namespace: str) -> str | None:
        """Return the target directory of a namespace, or None if it is not defined."""
        return self.namespaces.get(namespace)

    def items(self) -> Iterator[tuple[str, str]]:
        """Iterate (namespace, target directory) pairs in declared order."""
        return iter(self.namespaces.items())
