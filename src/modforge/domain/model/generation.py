"""Deferred generation rule value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class GenerationRule:
    """Generator command scheduled for the build tool to run.

    Attributes:
        command: Argument vector
        descriptor: Input descriptor (rule reruns when it changes)
        outputs: Files the command produces
    """

    command: tuple[str, ...]
    descriptor: Path
    outputs: tuple[Path, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.command:
            raise ValueError("command must not be empty")
        if not self.outputs:
            raise ValueError("outputs must not be empty")
