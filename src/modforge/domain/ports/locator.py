"""Module locator port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path


class ModuleLocatorPort(Protocol):
    """Contract for mapping a dependency identifier to a module location."""

    def locate(self, identifier: str) -> Path | None:
        """Canonical declaring directory for identifier.

        Returns:
            Absolute directory, or None if no module matches
        """
        ...
