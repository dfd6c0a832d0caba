"""Domain exceptions."""

from modforge.domain.exceptions.artifact import ArtifactNameCollision, GenerationError
from modforge.domain.exceptions.base import ModForgeError
from modforge.domain.exceptions.configuration import ConfigurationError, ModuleFinalizedError
from modforge.domain.exceptions.dependency import DependencyCycleError, UnresolvedDependency
from modforge.domain.exceptions.descriptor import UnknownDescriptorType

__all__ = [
    "ModForgeError",
    "UnknownDescriptorType",
    "UnresolvedDependency",
    "DependencyCycleError",
    "ArtifactNameCollision",
    "GenerationError",
    "ConfigurationError",
    "ModuleFinalizedError",
]
