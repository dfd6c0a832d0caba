"""Descriptor kind inference from XML content and file name."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

from modforge.domain.exceptions.descriptor import UnknownDescriptorType
from modforge.domain.model.enums import DESCRIPTOR_MARKER, DescriptorKind
from modforge.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

_log = get_logger("infrastructure.type_inference")


def read_root_element(path: Path) -> str:
    """Tag of the document element, without reading the whole file.

    Raises:
        OSError: If file cannot be read
        xml.etree.ElementTree.ParseError: If file is not well-formed up to the root
    """
    with path.open("rb") as handle:
        for _event, element in ET.iterparse(handle, events=("start",)):
            return element.tag
    raise ET.ParseError(f"{path} has no root element")


class XmlTypeInference:
    """Infers kind from the descriptor's XML root element.

    When the content does not identify a kind and use_file_name is set,
    falls back to the '<Name><Tag>Ai.xml' file name suffix.
    Files without the Ai.xml marker are rejected whatever their content:
    generated artifact names are derived from it.
    """

    def __init__(self, *, use_file_name: bool = True) -> None:
        self._use_file_name = use_file_name

    def infer(self, descriptor: Path) -> DescriptorKind:
        """Kind of descriptor.

        Raises:
            UnknownDescriptorType: If the name lacks the Ai.xml marker, or neither
                content nor name identify a kind
        """
        if not descriptor.name.endswith(DESCRIPTOR_MARKER):
            raise UnknownDescriptorType(
                descriptor, f"file name does not end with '{DESCRIPTOR_MARKER}'"
            )

        try:
            root = read_root_element(descriptor)
            return DescriptorKind.from_root_element(root, descriptor)
        except (OSError, ET.ParseError) as e:
            failure = UnknownDescriptorType(descriptor, f"unreadable descriptor ({e})")
        except UnknownDescriptorType as e:
            failure = e

        if not self._use_file_name:
            raise failure

        _log.debug("%s; falling back to file name", failure)
        try:
            return DescriptorKind.from_file_name(descriptor)
        except UnknownDescriptorType as e:
            raise UnknownDescriptorType(descriptor, f"{failure.reason}; {e.reason}") from failure
