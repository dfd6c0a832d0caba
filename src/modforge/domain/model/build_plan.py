"""Build plan aggregate: every unit of a configuration pass."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

from modforge.domain.model.graph import DiGraph
from modforge.domain.model.module_id import ModuleId

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from modforge.domain.model.compiled_unit import CompiledUnit
    from modforge.domain.model.install import InstallRule


@dataclass(frozen=True, slots=True)
class BuildPlan:
    """Immutable result of a configuration pass.

    Attributes:
        units: Module name -> compiled unit
        order: Module names, dependencies first
        configure_depends: Union of configuration-time dependencies
        graph: Module dependency graph over module names
    """

    units: Mapping[str, CompiledUnit]
    order: tuple[str, ...]
    configure_depends: tuple[Path, ...]
    graph: DiGraph[str]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if set(self.order) != set(self.units):
            raise ValueError("order must list every unit exactly once")
        for name, unit in self.units.items():
            if unit.name != name:
                raise ValueError(f"unit name {unit.name!r} does not match key {name!r}")

    def get(self, name: str) -> CompiledUnit | None:
        """Unit by module name. None if not found."""
        return self.units.get(name)

    @property
    def installs(self) -> Mapping[str, InstallRule]:
        """Install registry: module name -> destinations."""
        return {
            name: unit.install for name, unit in self.units.items() if unit.install is not None
        }

    def link_closure(self, name: str) -> tuple[ModuleId | str, ...]:
        """Full link line of a module.

        Own link items first, then each dependency's public link items,
        propagated from the already assembled units. Duplicates keep their
        first position.

        Raises:
            KeyError: If name is not a unit of this plan
        """
        closure: dict[ModuleId | str, None] = {}
        pending = deque(self.units[name].links)
        while pending:
            item = pending.popleft()
            if item in closure:
                continue
            closure[item] = None
            if isinstance(item, ModuleId):
                pending.extend(self.units[item.name].links)
        return tuple(closure)

    def to_dict(self) -> dict[str, object]:
        """JSON-ready representation for the build tool."""
        return {
            "order": list(self.order),
            "configure_depends": [str(path) for path in self.configure_depends],
            "units": [self.units[name].to_dict() for name in self.order],
        }
