"""Split raw module inputs into descriptors, sources, modules and link flags."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

LINK_FLAG_PREFIX = "-"

# Inputs handed to the code generator; the kind is decided by type inference
DESCRIPTOR_SUFFIXES = frozenset({".xml", ".txt"})


@dataclass(frozen=True, slots=True)
class ClassifiedInputs:
    """Module inputs by role.

    Attributes:
        descriptors: Code-generation descriptors, in input order
        sources: Literal compiled sources, in input order
    """

    descriptors: tuple[Path, ...]
    sources: tuple[Path, ...]


@dataclass(frozen=True, slots=True)
class SplitDependencies:
    """Declared dependencies by kind.

    Attributes:
        modules: Module identifiers (locations or names), in input order
        link_flags: Raw link flags such as -lm, in input order
    """

    modules: tuple[str, ...]
    link_flags: tuple[str, ...]


def is_descriptor(path: Path) -> bool:
    """True if path is a code-generation input (.xml or .txt)."""
    return path.suffix in DESCRIPTOR_SUFFIXES


def classify_inputs(paths: Iterable[Path | str]) -> ClassifiedInputs:
    """Split inputs into descriptors and literal sources.

    Anything that is not a descriptor is a literal source. Never fails:
    a descriptor of no known kind is rejected later, by type inference.
    """
    descriptors: list[Path] = []
    sources: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if is_descriptor(path):
            descriptors.append(path)
        else:
            sources.append(path)
    return ClassifiedInputs(descriptors=tuple(descriptors), sources=tuple(sources))


def split_dependencies(dependencies: Iterable[str]) -> SplitDependencies:
    """Split declared dependencies into module identifiers and link flags.

    Entries starting with '-' (-lm, -lpthread) are link flags; empty
    entries are ignored.
    """
    modules: list[str] = []
    flags: list[str] = []
    for raw in dependencies:
        entry = raw.strip()
        if not entry:
            continue
        if entry.startswith(LINK_FLAG_PREFIX):
            flags.append(entry)
        else:
            modules.append(entry)
    return SplitDependencies(modules=tuple(modules), link_flags=tuple(flags))
