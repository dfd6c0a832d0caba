"""Domain model entities."""

from modforge.domain.model.artifact import GeneratedArtifact
from modforge.domain.model.build_plan import BuildPlan
from modforge.domain.model.compiled_unit import CompiledUnit
from modforge.domain.model.configuration import BuildConfig
from modforge.domain.model.dependency import DependencyEdge, DependencySet
from modforge.domain.model.descriptor import Descriptor
from modforge.domain.model.enums import (
    BuildType,
    DependencyKind,
    DescriptorKind,
    OutputPolicy,
    TargetKind,
)
from modforge.domain.model.generation import GenerationRule
from modforge.domain.model.graph import DiGraph
from modforge.domain.model.install import InstallRule
from modforge.domain.model.module import Module
from modforge.domain.model.module_id import ModuleId

__all__ = [
    # Enums
    "BuildType",
    "DependencyKind",
    "DescriptorKind",
    "OutputPolicy",
    "TargetKind",
    # Value objects
    "ModuleId",
    "Descriptor",
    "GeneratedArtifact",
    "DependencyEdge",
    "GenerationRule",
    "InstallRule",
    "BuildConfig",
    # Entities
    "DependencySet",
    "Module",
    # Build-tool boundary
    "CompiledUnit",
    "BuildPlan",
    "DiGraph",
]
