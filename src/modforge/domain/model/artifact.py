"""Generated artifact value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from modforge.domain.model.descriptor import Descriptor


@dataclass(frozen=True, slots=True)
class GeneratedArtifact:
    """Header/source pair produced by the generator for one descriptor.

    Attributes:
        descriptor: Owning descriptor
        header: Generated header path
        source: Generated source path
    """

    descriptor: Descriptor
    header: Path
    source: Path

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.descriptor is None:
            raise TypeError("descriptor must not be None")
        if self.header == self.source:
            raise ValueError(f"header and source must differ, got {self.header}")

    @property
    def paths(self) -> tuple[Path, Path]:
        """(header, source)."""
        return (self.header, self.source)
