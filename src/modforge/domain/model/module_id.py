"""Module identity value object."""

from __future__ import annotations

import os.path
from dataclasses import dataclass
from pathlib import Path

from modforge.domain.exceptions.configuration import ConfigurationError


@dataclass(frozen=True, slots=True)
class ModuleId:
    """Identity of a module, derived from its declaring location.

    Attributes:
        name: Build target name (location relative to project root, '/' -> '_')
        location: Absolute declaring directory
    """

    name: str
    location: Path

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("module name must not be empty")
        if not self.location.is_absolute():
            raise ValueError(f"location must be absolute, got {self.location}")

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_location(cls, location: Path, project_root: Path) -> ModuleId:
        """Canonical identity for a declaring directory. Pure.

        Two calls with the same location always produce equal identities.

        Raises:
            ConfigurationError: If location is outside project_root
        """
        absolute = Path(_normalize(project_root / location))
        root = Path(_normalize(project_root))
        try:
            relative = absolute.relative_to(root)
        except ValueError:
            raise ConfigurationError(f"{location} is outside project root {project_root}") from None

        if not relative.parts:
            raise ConfigurationError(f"{location} is the project root, not a module directory")

        return cls(name="_".join(relative.parts), location=absolute)


def _normalize(path: Path) -> str:
    """Lexically normalize without touching the filesystem."""
    return os.path.normpath(os.path.abspath(path))
