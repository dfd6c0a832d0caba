"""Domain enumerations."""

from __future__ import annotations

from enum import Enum, auto
from pathlib import Path

from modforge.domain.exceptions.descriptor import UnknownDescriptorType

# File name marker shared by every code-generation descriptor
DESCRIPTOR_MARKER = "Ai.xml"


class DescriptorKind(Enum):
    """Closed set of code-generation descriptor kinds.

    Value is the type tag embedded in descriptor and artifact file names
    (FooComponentAi.xml -> FooComponentAc.hpp).
    """

    COMPONENT = "Component"
    PORT = "Port"
    SERIALIZABLE = "Serializable"
    ENUM = "Enum"
    ARRAY = "Array"
    TOPOLOGY = "TopologyApp"

    @property
    def tag(self) -> str:
        """Type tag used in generated file names."""
        return self.value

    @property
    def generator_name(self) -> str:
        """Name the external generator expects for this kind."""
        return self.value.lower()

    @classmethod
    def from_tag(cls, tag: str, path: Path | None = None) -> DescriptorKind:
        """Map type tag to kind.

        Raises:
            UnknownDescriptorType: If tag is not one of the known kinds
        """
        for kind in cls:
            if kind.value == tag:
                return kind
        raise UnknownDescriptorType(path or Path(tag), f"unknown type tag '{tag}'")

    @classmethod
    def from_root_element(cls, element: str, path: Path) -> DescriptorKind:
        """Map descriptor XML root element to kind.

        Raises:
            UnknownDescriptorType: If element does not mark a known kind
        """
        kind = _ROOT_ELEMENTS.get(element.lower())
        if kind is None:
            raise UnknownDescriptorType(path, f"unknown root element <{element}>")
        return kind

    @classmethod
    def from_file_name(cls, path: Path) -> DescriptorKind:
        """Infer kind from '<Name><Tag>Ai.xml' file name suffix.

        Longest tag wins so 'TopologyApp' is not mistaken for a shorter tag.

        Raises:
            UnknownDescriptorType: If name carries no known tag
        """
        name = path.name
        if not name.endswith(DESCRIPTOR_MARKER):
            raise UnknownDescriptorType(path, f"file name does not end with '{DESCRIPTOR_MARKER}'")
        stem = name[: -len(DESCRIPTOR_MARKER)]
        for kind in sorted(cls, key=lambda k: len(k.value), reverse=True):
            if stem.endswith(kind.value) and len(stem) > len(kind.value):
                return kind
        raise UnknownDescriptorType(path, "file name carries no known type tag")


_ROOT_ELEMENTS: dict[str, DescriptorKind] = {
    "component": DescriptorKind.COMPONENT,
    "interface": DescriptorKind.PORT,
    "serializable": DescriptorKind.SERIALIZABLE,
    "enum": DescriptorKind.ENUM,
    "array": DescriptorKind.ARRAY,
    "assembly": DescriptorKind.TOPOLOGY,
    "deployment": DescriptorKind.TOPOLOGY,
}


class DependencyKind(Enum):
    """What a dependency edge points at."""

    MODULE = auto()  # another module's compiled artifact
    LINK_FLAG = auto()  # raw link requirement such as -lm


class OutputPolicy(Enum):
    """Where generated artifacts are written."""

    SOURCE_TREE = "source-tree"
    BUILD_TREE = "build-tree"


class BuildType(Enum):
    """Active build configuration tag."""

    NORMAL = "normal"
    TESTING = "testing"


class TargetKind(Enum):
    """Compiled unit produced for a module."""

    LIBRARY = "library"
    EXECUTABLE = "executable"
