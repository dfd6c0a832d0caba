"""Descriptor exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modforge.domain.exceptions.base import ModForgeError

if TYPE_CHECKING:
    from pathlib import Path


class UnknownDescriptorType(ModForgeError):
    """Descriptor kind could not be inferred.

    Aborts configuration of the owning module: naming, generation and
    dependency mining all need the kind.

    Attributes:
        path: Descriptor file
        reason: Why inference failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Cannot infer descriptor type of {path}: {reason}")
