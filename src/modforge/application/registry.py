"""Append-only registry of module identities."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from modforge.domain.exceptions.configuration import ConfigurationError
from modforge.domain.model.module_id import ModuleId
from modforge.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

_log = get_logger("registry")


class ModuleRegistry:
    """Canonical location -> module identity, for one configuration pass.

    Append-only. Declaring a location twice returns the identity created
    the first time. Module names must stay unique: 'Svc/Cmd_Seq' and
    'Svc_Cmd/Seq' both flatten to 'Svc_Cmd_Seq', so the second one is
    rejected instead of aliasing the first.
    """

    def __init__(self, project_root: Path) -> None:
        """Initialize empty registry.

        Args:
            project_root: Root that identities are derived from
        """
        self._project_root = project_root
        self._by_location: dict[Path, ModuleId] = {}
        self._by_name: dict[str, ModuleId] = {}

    def declare(self, location: Path) -> ModuleId:
        """Identity for location, created on first declaration.

        Raises:
            ConfigurationError: If location is outside the project root, or
                its module name is already owned by another location
        """
        candidate = ModuleId.from_location(location, self._project_root)
        existing = self._by_location.get(candidate.location)
        if existing is not None:
            return existing

        owner = self._by_name.get(candidate.name)
        if owner is not None:
            raise ConfigurationError(
                f"{candidate.location} and {owner.location} both map to module name "
                f"'{candidate.name}'"
            )

        self._by_location[candidate.location] = candidate
        self._by_name[candidate.name] = candidate
        _log.debug("Registered module %s at %s", candidate.name, candidate.location)
        return candidate

    def lookup(self, name: str) -> ModuleId | None:
        """Identity by module name. None if never declared."""
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)

    @property
    def modules(self) -> Mapping[str, ModuleId]:
        """Read-only view by name, in declaration order."""
        return MappingProxyType(self._by_name)
