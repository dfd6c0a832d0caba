"""Generated artifact exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modforge.domain.exceptions.base import ModForgeError

if TYPE_CHECKING:
    from pathlib import Path


class ArtifactNameCollision(ModForgeError):
    """Two descriptors map to the same generated file.

    Attributes:
        path: Colliding generated path
        first: Descriptor that claimed the path first
        second: Descriptor that tried to claim it again
    """

    def __init__(self, path: Path, first: Path, second: Path) -> None:
        if path is None:
            raise TypeError("path must not be None")
        if first is None or second is None:
            raise TypeError("colliding descriptors must not be None")

        self.path = path
        self.first = first
        self.second = second
        super().__init__(f"{first} and {second} both generate {path}")


class GenerationError(ModForgeError):
    """External code generator failed for a descriptor.

    Attributes:
        descriptor: Descriptor being generated
        reason: Failure description (exit status, stderr)
    """

    def __init__(self, descriptor: Path, reason: str) -> None:
        if descriptor is None:
            raise TypeError("descriptor must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.descriptor = descriptor
        self.reason = reason
        super().__init__(f"Code generation failed for {descriptor}: {reason}")
