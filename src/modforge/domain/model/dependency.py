"""Dependency edges and the insertion-ordered dependency set."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from modforge.domain.model.enums import DependencyKind
from modforge.domain.model.module_id import ModuleId

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class DependencyEdge:
    """Edge from a module to another module or to a raw link flag.

    Attributes:
        source: Declaring module
        target: Target module (MODULE) or link flag text (LINK_FLAG)
        kind: Edge kind
    """

    source: ModuleId
    target: ModuleId | str
    kind: DependencyKind

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.kind is DependencyKind.MODULE:
            if not isinstance(self.target, ModuleId):
                raise TypeError(f"module edge target must be ModuleId, got {type(self.target).__name__}")
            if self.target == self.source:
                raise ValueError(f"module '{self.source}' cannot depend on itself")
        elif not isinstance(self.target, str) or not self.target:
            raise ValueError("link flag edge target must be a non-empty string")

    @property
    def key(self) -> tuple[DependencyKind, ModuleId | str]:
        """Identity used for deduplication."""
        return (self.kind, self.target)


@dataclass(slots=True)
class DependencySet:
    """Insertion-ordered set of dependency edges.

    Duplicate targets are merged: the first occurrence keeps its position.
    """

    _edges: dict[tuple[DependencyKind, ModuleId | str], DependencyEdge] = field(default_factory=dict)

    def add(self, edge: DependencyEdge) -> bool:
        """Insert edge unless its target is already present.

        Returns:
            True if edge was new
        """
        if edge.key in self._edges:
            return False
        self._edges[edge.key] = edge
        return True

    def __contains__(self, edge: object) -> bool:
        return isinstance(edge, DependencyEdge) and edge.key in self._edges

    def __iter__(self) -> Iterator[DependencyEdge]:
        return iter(self._edges.values())

    def __len__(self) -> int:
        return len(self._edges)

    @property
    def modules(self) -> tuple[ModuleId, ...]:
        """Module targets in link order."""
        return tuple(
            edge.target for edge in self._edges.values() if isinstance(edge.target, ModuleId)
        )

    @property
    def link_flags(self) -> tuple[str, ...]:
        """Link flag targets in link order."""
        return tuple(
            edge.target
            for edge in self._edges.values()
            if edge.kind is DependencyKind.LINK_FLAG and isinstance(edge.target, str)
        )
