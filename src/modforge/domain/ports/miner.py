"""Dependency miner port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from modforge.domain.model.enums import DescriptorKind
    from modforge.domain.model.module_id import ModuleId


class DependencyMinerPort(Protocol):
    """Contract for extracting dependency identifiers from a descriptor."""

    def mine(
        self,
        descriptor: Path,
        module: ModuleId,
        kind: DescriptorKind,
    ) -> tuple[str, ...]:
        """Identifiers of modules the descriptor references.

        Args:
            descriptor: Absolute descriptor path
            module: Module that owns the descriptor
            kind: Descriptor kind

        Returns:
            Identifiers in reference order (may repeat)
        """
        ...
