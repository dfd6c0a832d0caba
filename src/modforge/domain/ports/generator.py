"""Code generator port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from modforge.domain.model.enums import DescriptorKind
    from modforge.domain.model.generation import GenerationRule


class GeneratorPort(Protocol):
    """Contract for the external code generator.

    Called exactly once per descriptor and configuration pass.
    """

    def generate(
        self,
        kind: DescriptorKind,
        descriptor: Path,
        header: Path,
        source: Path,
    ) -> GenerationRule | None:
        """Produce header and source for a descriptor.

        Args:
            kind: Descriptor kind
            descriptor: Absolute descriptor path
            header: Header path to write
            source: Source path to write

        Returns:
            Rule for the build tool to run later, or None if files were written now

        Raises:
            GenerationError: If generation fails
        """
        ...
