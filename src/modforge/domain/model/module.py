"""Module entity: one compiled library or executable under configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from modforge.domain.exceptions.configuration import ModuleFinalizedError
from modforge.domain.model.dependency import DependencyEdge, DependencySet
from modforge.domain.model.enums import BuildType, DependencyKind, TargetKind

if TYPE_CHECKING:
    from pathlib import Path

    from modforge.domain.model.artifact import GeneratedArtifact
    from modforge.domain.model.module_id import ModuleId


@dataclass(slots=True)
class Module:
    """Unit of compilation being configured.

    The only mutable entity in the domain model. Mutated while its inputs
    are classified and its dependencies discovered, frozen by finalize().

    Attributes:
        id: Module identity
        target_kind: Library or executable
        build_type: Active build configuration tag
        exclude_from_all: Excluded from default build and install
        sources: Literal source paths (ordered, unique)
        artifacts: Generated artifacts (ordered)
        dependencies: Module and link flag dependencies
    """

    id: ModuleId
    target_kind: TargetKind = TargetKind.LIBRARY
    build_type: BuildType = BuildType.NORMAL
    exclude_from_all: bool = False
    sources: list[Path] = field(default_factory=list)
    artifacts: list[GeneratedArtifact] = field(default_factory=list)
    dependencies: DependencySet = field(default_factory=DependencySet)
    _finalized: bool = field(default=False, repr=False)

    @property
    def name(self) -> str:
        """Build target name."""
        return self.id.name

    @property
    def is_finalized(self) -> bool:
        """True once handed to the build tool."""
        return self._finalized

    def add_source(self, path: Path) -> bool:
        """Add literal source, ignoring repeats. Returns True if new."""
        self._check_mutable()
        if path in self.sources:
            return False
        self.sources.append(path)
        return True

    def add_artifact(self, artifact: GeneratedArtifact) -> None:
        """Register generated artifact as module sources."""
        self._check_mutable()
        self.artifacts.append(artifact)

    def depend_on(self, target: ModuleId) -> bool:
        """Add module dependency. Returns True if new."""
        self._check_mutable()
        return self.dependencies.add(
            DependencyEdge(source=self.id, target=target, kind=DependencyKind.MODULE)
        )

    def link_with(self, flag: str) -> bool:
        """Add link flag dependency. Returns True if new."""
        self._check_mutable()
        return self.dependencies.add(
            DependencyEdge(source=self.id, target=flag, kind=DependencyKind.LINK_FLAG)
        )

    def finalize(self) -> None:
        """Freeze module. Further mutation raises ModuleFinalizedError."""
        self._finalized = True

    def _check_mutable(self) -> None:
        if self._finalized:
            raise ModuleFinalizedError(self.name)
