"""Application services for module configuration.

ConfigurationSession is the main facade for a configuration pass.
"""

from modforge.application.assembler import ModuleAssembler
from modforge.application.classifier import classify_inputs, split_dependencies
from modforge.application.context import ConfigurationContext
from modforge.application.invoker import GeneratorInvoker
from modforge.application.namer import ArtifactNamer, artifact_paths
from modforge.application.registry import ModuleRegistry
from modforge.application.resolver import DependencyResolver
from modforge.application.session import ConfigurationSession

__all__ = [
    "ConfigurationSession",
    "ConfigurationContext",
    "ModuleRegistry",
    "classify_inputs",
    "split_dependencies",
    "ArtifactNamer",
    "artifact_paths",
    "GeneratorInvoker",
    "DependencyResolver",
    "ModuleAssembler",
]
