"""Code-generation descriptor value object."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from modforge.domain.model.enums import DESCRIPTOR_MARKER, DescriptorKind


@dataclass(frozen=True, slots=True)
class Descriptor:
    """Input file describing a type to be code-generated.

    Attributes:
        path: Absolute descriptor path
        kind: Inferred descriptor kind
    """

    path: Path
    kind: DescriptorKind

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if self.kind is None:
            raise TypeError("kind must not be None")

    @property
    def base_name(self) -> str:
        """File name with optional type tag and 'Ai.xml' marker stripped.

        FooComponentAi.xml -> Foo, FooAi.xml -> Foo.
        """
        return base_name_of(self.path.name, self.kind)


def base_name_of(file_name: str, kind: DescriptorKind) -> str:
    """Strip '(<Tag>)?Ai.xml' from a descriptor file name."""
    pattern = f"({re.escape(kind.tag)})?{re.escape(DESCRIPTOR_MARKER)}$"
    return re.sub(pattern, "", file_name)
