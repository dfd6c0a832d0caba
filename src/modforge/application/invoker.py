"""Generator invocation: one generator call per descriptor."""

from __future__ import annotations

import os.path
from pathlib import Path
from typing import TYPE_CHECKING

from modforge.domain.model.descriptor import Descriptor
from modforge.logging import get_logger

if TYPE_CHECKING:
    from modforge.application.context import ConfigurationContext
    from modforge.application.namer import ArtifactNamer
    from modforge.domain.model.artifact import GeneratedArtifact
    from modforge.domain.model.module import Module
    from modforge.domain.ports.generator import GeneratorPort
    from modforge.domain.ports.type_inference import TypeInferencePort

_log = get_logger("invoker")


class GeneratorInvoker:
    """Runs the external generator for a module's descriptors.

    Registers outputs as module sources and every descriptor as a
    configuration-time dependency: a descriptor edit can change the
    dependency graph, not only the generated code.
    """

    def __init__(
        self,
        context: ConfigurationContext,
        namer: ArtifactNamer,
        inference: TypeInferencePort,
        generator: GeneratorPort,
    ) -> None:
        self._context = context
        self._namer = namer
        self._inference = inference
        self._generator = generator

    def invoke(self, module: Module, path: Path) -> GeneratedArtifact:
        """Generate artifacts for one descriptor of module.

        A second call for the same module and descriptor returns the first
        artifact without calling the generator again.

        Args:
            module: Owning module (not finalized)
            path: Descriptor path, relative paths taken from module location

        Returns:
            Generated artifact registered on module

        Raises:
            UnknownDescriptorType: If kind cannot be inferred
            ArtifactNameCollision: If another descriptor owns the output paths
            GenerationError: If the generator fails
        """
        absolute = Path(os.path.normpath(module.id.location / path))

        previous = self._context.invocation(module.id, absolute)
        if previous is not None:
            _log.debug("Skipping %s: already generated for %s", absolute, module.name)
            return previous

        kind = self._inference.infer(absolute)
        descriptor = Descriptor(path=absolute, kind=kind)
        _log.info("Found %s: %s in %s", kind.generator_name, descriptor.base_name, absolute)

        artifact = self._namer.name(descriptor, module.id)
        self._context.claim_artifact(module.id, artifact)

        rule = self._generator.generate(kind, absolute, artifact.header, artifact.source)

        module.add_artifact(artifact)
        self._context.add_configure_depend(absolute)
        self._context.record_invocation(module.id, artifact, rule)
        _log.debug("Generated %s %s", artifact.header, artifact.source)
        return artifact
