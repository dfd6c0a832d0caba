"""Module location lookup in the source tree."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class SourceTreeLocator:
    """Finds module directories under a set of search roots.

    Identifiers may be absolute directories, relative directories
    ('Fw/Cmd') or module names ('Fw_Cmd'). A module name is tried with
    every '_' read as a path separator.
    """

    def __init__(self, roots: Iterable[Path]) -> None:
        self._roots = tuple(Path(root).absolute() for root in roots)
        if not self._roots:
            raise ValueError("roots must not be empty")

    @property
    def roots(self) -> tuple[Path, ...]:
        """Search roots in priority order."""
        return self._roots

    def locate(self, identifier: str) -> Path | None:
        """First existing directory matching identifier. None if none."""
        stripped = identifier.strip()
        if not stripped:
            return None

        path = Path(stripped)
        if path.is_absolute():
            return path if path.is_dir() else None

        relatives = [path]
        if "_" in stripped and "/" not in stripped:
            relatives.append(Path(*stripped.split("_")))

        for root in self._roots:
            for relative in relatives:
                candidate = root / relative
                if candidate.is_dir():
                    return candidate
        return None
