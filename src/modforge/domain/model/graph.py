"""Immutable module dependency graph.

Dependency order via stdlib graphlib.TopologicalSorter.
"""

from __future__ import annotations

from dataclasses import dataclass
from graphlib import CycleError, TopologicalSorter
from typing import TYPE_CHECKING, Generic, TypeVar

from modforge.domain.exceptions.dependency import DependencyCycleError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class DiGraph(Generic[T]):
    """Immutable directed graph, edge a -> b means a depends on b.

    Invariants (FAIL-FIRST):
    - All nodes in edges must be in nodes set

    Attributes:
        forward: Node -> ordered successors (dependencies, in link order)
        nodes: All nodes in graph (including isolated)
    """

    forward: Mapping[T, tuple[T, ...]]
    nodes: frozenset[T]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for node, successors in self.forward.items():
            if node not in self.nodes:
                raise ValueError(f"forward key '{node}' not in nodes")
            for succ in successors:
                if succ not in self.nodes:
                    raise ValueError(f"successor '{succ}' of '{node}' not in nodes")

    def successors(self, node: T) -> tuple[T, ...]:
        """Direct dependencies of node, in insertion order."""
        return self.forward.get(node, ())

    def has_edge(self, from_: T, to: T) -> bool:
        """Check if edge exists."""
        return to in self.forward.get(from_, ())

    @property
    def edge_count(self) -> int:
        """Total number of edges."""
        return sum(len(succs) for succs in self.forward.values())

    def reachable(self, node: T) -> tuple[T, ...]:
        """All transitive dependencies of node, depth-first in link order.

        Each node appears once, at its first visit. node itself is excluded.
        """
        seen: dict[T, None] = {}
        stack = list(reversed(self.successors(node)))
        while stack:
            current = stack.pop()
            if current in seen or current == node:
                continue
            seen[current] = None
            stack.extend(reversed(self.successors(current)))
        return tuple(seen)

    def topological_order(self) -> tuple[T, ...]:
        """Nodes with dependencies before dependants.

        Raises:
            DependencyCycleError: If graph contains a cycle
        """
        sorter: TopologicalSorter[T] = TopologicalSorter(
            {node: self.successors(node) for node in sorted(self.nodes, key=str)}
        )
        try:
            return tuple(sorter.static_order())
        except CycleError as e:
            # e.args[1] is the cycle path [a, b, ..., a]
            raise DependencyCycleError(tuple(str(node) for node in e.args[1])) from None

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[T, T]],
        extra_nodes: Iterable[T] = (),
    ) -> DiGraph[T]:
        """Build graph from (from, to) pairs, keeping first-seen edge order."""
        forward: dict[T, dict[T, None]] = {}
        nodes: set[T] = set(extra_nodes)

        for from_node, to_node in edges:
            nodes.add(from_node)
            nodes.add(to_node)
            forward.setdefault(from_node, {})[to_node] = None

        return cls(
            forward={k: tuple(v) for k, v in forward.items()},
            nodes=frozenset(nodes),
        )

    @classmethod
    def empty(cls) -> DiGraph[T]:
        """Graph with no nodes or edges."""
        return cls(forward={}, nodes=frozenset())
