"""Configuration context: all state shared across one configuration pass."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modforge.application.registry import ModuleRegistry
from modforge.domain.exceptions.artifact import ArtifactNameCollision
from modforge.domain.exceptions.configuration import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from modforge.domain.model.artifact import GeneratedArtifact
    from modforge.domain.model.compiled_unit import CompiledUnit
    from modforge.domain.model.configuration import BuildConfig
    from modforge.domain.model.generation import GenerationRule
    from modforge.domain.model.module_id import ModuleId


class ConfigurationContext:
    """Explicit context passed to every pipeline step.

    Holds the identity registry, the generated-path claims used for
    collision detection, the generator invocation guard, configuration-time
    dependencies and the units assembled so far.

    Attributes:
        config: Build configuration
        registry: Module identity registry
    """

    def __init__(self, config: BuildConfig) -> None:
        """Initialize empty context for config."""
        self.config = config
        self.registry = ModuleRegistry(config.project_root)
        self._claims: dict[Path, tuple[str, Path]] = {}
        self._invocations: dict[tuple[str, Path], GeneratedArtifact] = {}
        self._rules: dict[str, list[GenerationRule]] = {}
        self._configure_depends: dict[Path, None] = {}
        self._units: dict[str, CompiledUnit] = {}

    # =========================================================================
    # Generated artifacts
    # =========================================================================

    def claim_artifact(self, module: ModuleId, artifact: GeneratedArtifact) -> None:
        """Reserve both generated paths for artifact's descriptor.

        Raises:
            ArtifactNameCollision: If another descriptor already owns a path
        """
        owner = (module.name, artifact.descriptor.path)
        for path in artifact.paths:
            claimed = self._claims.get(path)
            if claimed is not None and claimed != owner:
                raise ArtifactNameCollision(path, claimed[1], artifact.descriptor.path)
        for path in artifact.paths:
            self._claims[path] = owner

    def invocation(self, module: ModuleId, descriptor: Path) -> GeneratedArtifact | None:
        """Artifact of an earlier generator call, None if not yet invoked."""
        return self._invocations.get((module.name, descriptor))

    def record_invocation(
        self,
        module: ModuleId,
        artifact: GeneratedArtifact,
        rule: GenerationRule | None = None,
    ) -> None:
        """Remember a generator call so it is not repeated."""
        self._invocations[(module.name, artifact.descriptor.path)] = artifact
        if rule is not None:
            self._rules.setdefault(module.name, []).append(rule)

    def generation_rules(self, module: ModuleId) -> tuple[GenerationRule, ...]:
        """Deferred generator commands recorded for module."""
        return tuple(self._rules.get(module.name, ()))

    # =========================================================================
    # Configuration-time dependencies
    # =========================================================================

    def add_configure_depend(self, path: Path) -> None:
        """Changing path must re-run configuration, not just the build."""
        self._configure_depends[path] = None

    @property
    def configure_depends(self) -> tuple[Path, ...]:
        """All configuration-time dependencies in discovery order."""
        return tuple(self._configure_depends)

    # =========================================================================
    # Assembled units
    # =========================================================================

    def register_unit(self, unit: CompiledUnit) -> None:
        """Record a finalized unit.

        Raises:
            ConfigurationError: If module was already assembled
        """
        if unit.name in self._units:
            raise ConfigurationError(f"module '{unit.name}' is assembled twice")
        self._units[unit.name] = unit

    def is_assembled(self, name: str) -> bool:
        """True if a unit exists for module name."""
        return name in self._units

    @property
    def units(self) -> Mapping[str, CompiledUnit]:
        """Assembled units in assembly order."""
        return dict(self._units)

    def pending(self) -> tuple[ModuleId, ...]:
        """Declared modules that were never assembled."""
        return tuple(
            module_id
            for name, module_id in self.registry.modules.items()
            if name not in self._units
        )
