"""Deterministic names of generated artifacts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modforge.domain.exceptions.configuration import ConfigurationError
from modforge.domain.model.artifact import GeneratedArtifact
from modforge.domain.model.enums import OutputPolicy

if TYPE_CHECKING:
    from pathlib import Path

    from modforge.domain.model.configuration import BuildConfig
    from modforge.domain.model.descriptor import Descriptor
    from modforge.domain.model.enums import DescriptorKind
    from modforge.domain.model.module_id import ModuleId

HEADER_SUFFIX = "Ac.hpp"
SOURCE_SUFFIX = "Ac.cpp"


def artifact_paths(output_root: Path, base_name: str, kind: DescriptorKind) -> tuple[Path, Path]:
    """(header, source) for base_name and kind under output_root. Pure."""
    if not base_name:
        raise ValueError("base_name must not be empty")
    stem = f"{base_name}{kind.tag}"
    return (output_root / f"{stem}{HEADER_SUFFIX}", output_root / f"{stem}{SOURCE_SUFFIX}")


class ArtifactNamer:
    """Computes where the generator writes a descriptor's outputs.

    SOURCE_TREE: next to the descriptor.
    BUILD_TREE: in the owning module's build directory.
    """

    def __init__(self, config: BuildConfig) -> None:
        self._config = config

    def output_root(self, descriptor: Descriptor, module: ModuleId) -> Path:
        """Directory receiving the generated pair."""
        if self._config.output_policy is OutputPolicy.SOURCE_TREE:
            return descriptor.path.parent
        return self._config.binary_dir(module.location)

    def name(self, descriptor: Descriptor, module: ModuleId) -> GeneratedArtifact:
        """Generated artifact for descriptor, owned by module.

        Raises:
            ConfigurationError: If descriptor file name leaves an empty base name
        """
        if not descriptor.base_name:
            raise ConfigurationError(f"descriptor {descriptor.path} has an empty base name")
        header, source = artifact_paths(
            self.output_root(descriptor, module), descriptor.base_name, descriptor.kind
        )
        return GeneratedArtifact(descriptor=descriptor, header=header, source=source)
