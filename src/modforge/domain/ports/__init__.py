"""Ports to the external collaborators of a configuration pass."""

from modforge.domain.ports.generator import GeneratorPort
from modforge.domain.ports.locator import ModuleLocatorPort
from modforge.domain.ports.miner import DependencyMinerPort
from modforge.domain.ports.type_inference import TypeInferencePort

__all__ = [
    "GeneratorPort",
    "DependencyMinerPort",
    "TypeInferencePort",
    "ModuleLocatorPort",
]
