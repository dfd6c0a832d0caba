"""Compiled unit: what the build tool receives for one module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from modforge.domain.model.module_id import ModuleId

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from modforge.domain.model.artifact import GeneratedArtifact
    from modforge.domain.model.enums import TargetKind
    from modforge.domain.model.generation import GenerationRule
    from modforge.domain.model.install import InstallRule


@dataclass(frozen=True, slots=True)
class CompiledUnit:
    """Finalized library or executable for one module.

    Attributes:
        module: Module identity
        target_kind: Library or executable
        sources: Compiled sources in order (literal, then generated pairs)
        links: Link items in link order (ModuleId or link flag)
        order_dependencies: Build targets that must be built first
        compile_definitions: Definitions applied to every source
        file_ids: Per-source file id definitions
        install: Install destinations, None when excluded
        configure_depends: Files whose change re-runs configuration
        artifacts: Generated artifacts owned by this unit
        generation_rules: Generator commands scheduled for the build tool
    """

    module: ModuleId
    target_kind: TargetKind
    sources: tuple[Path, ...]
    links: tuple[ModuleId | str, ...]
    order_dependencies: tuple[str, ...]
    compile_definitions: tuple[str, ...]
    file_ids: Mapping[Path, int]
    install: InstallRule | None
    configure_depends: tuple[Path, ...]
    artifacts: tuple[GeneratedArtifact, ...] = ()
    generation_rules: tuple[GenerationRule, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.sources:
            raise ValueError(f"unit '{self.module}' must have at least one source")
        if len(set(self.sources)) != len(self.sources):
            raise ValueError(f"unit '{self.module}' has duplicate sources")

    @property
    def name(self) -> str:
        """Build target name."""
        return self.module.name

    @property
    def module_dependencies(self) -> tuple[ModuleId, ...]:
        """Module link items in link order."""
        return tuple(item for item in self.links if isinstance(item, ModuleId))

    @property
    def link_flags(self) -> tuple[str, ...]:
        """Raw link flags in link order."""
        return tuple(item for item in self.links if isinstance(item, str))

    @property
    def is_installed(self) -> bool:
        """True if registered for installation."""
        return self.install is not None

    def to_dict(self) -> dict[str, object]:
        """JSON-ready representation for the build tool."""
        return {
            "name": self.name,
            "location": str(self.module.location),
            "kind": self.target_kind.value,
            "sources": [str(path) for path in self.sources],
            "links": [item.name if isinstance(item, ModuleId) else item for item in self.links],
            "order_dependencies": list(self.order_dependencies),
            "compile_definitions": list(self.compile_definitions),
            "file_ids": {str(path): file_id for path, file_id in self.file_ids.items()},
            "install": (
                None
                if self.install is None
                else {
                    "runtime": self.install.runtime,
                    "library": self.install.library,
                    "archive": self.install.archive,
                }
            ),
            "configure_depends": [str(path) for path in self.configure_depends],
            "generation_rules": [
                {
                    "command": list(rule.command),
                    "descriptor": str(rule.descriptor),
                    "outputs": [str(path) for path in rule.outputs],
                }
                for rule in self.generation_rules
            ],
        }
