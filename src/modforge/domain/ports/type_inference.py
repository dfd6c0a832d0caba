"""Descriptor type inference port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from modforge.domain.model.enums import DescriptorKind


class TypeInferencePort(Protocol):
    """Contract for determining a descriptor's kind."""

    def infer(self, descriptor: Path) -> DescriptorKind:
        """Kind of descriptor.

        Raises:
            UnknownDescriptorType: If kind cannot be determined
        """
        ...
