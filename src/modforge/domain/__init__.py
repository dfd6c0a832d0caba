"""modforge domain layer.

Pure domain logic with no external dependencies.
"""

from modforge.domain.exceptions import (
    ArtifactNameCollision,
    ConfigurationError,
    DependencyCycleError,
    GenerationError,
    ModForgeError,
    ModuleFinalizedError,
    UnknownDescriptorType,
    UnresolvedDependency,
)
from modforge.domain.model import (
    BuildConfig,
    BuildPlan,
    BuildType,
    CompiledUnit,
    DependencyEdge,
    DependencyKind,
    Descriptor,
    DescriptorKind,
    GeneratedArtifact,
    InstallRule,
    Module,
    ModuleId,
    OutputPolicy,
    TargetKind,
)

__all__ = [
    # Exceptions
    "ModForgeError",
    "UnknownDescriptorType",
    "UnresolvedDependency",
    "DependencyCycleError",
    "ArtifactNameCollision",
    "GenerationError",
    "ConfigurationError",
    "ModuleFinalizedError",
    # Enums
    "BuildType",
    "DependencyKind",
    "DescriptorKind",
    "OutputPolicy",
    "TargetKind",
    # Model
    "ModuleId",
    "Descriptor",
    "GeneratedArtifact",
    "DependencyEdge",
    "InstallRule",
    "BuildConfig",
    "Module",
    "CompiledUnit",
    "BuildPlan",
]
