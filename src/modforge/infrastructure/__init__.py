"""Reference adapters for the external collaborators."""

from modforge.infrastructure.generator import DeferredGenerator, SubprocessGenerator
from modforge.infrastructure.locator import SourceTreeLocator
from modforge.infrastructure.miner import XmlDependencyMiner
from modforge.infrastructure.type_inference import XmlTypeInference

__all__ = [
    "DeferredGenerator",
    "SubprocessGenerator",
    "SourceTreeLocator",
    "XmlDependencyMiner",
    "XmlTypeInference",
]
