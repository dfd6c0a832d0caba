"""Dependency mining from descriptor import elements."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from modforge.domain.exceptions.configuration import ConfigurationError
from modforge.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from modforge.domain.model.enums import DescriptorKind
    from modforge.domain.model.module_id import ModuleId

_log = get_logger("infrastructure.miner")

IMPORT_ELEMENTS = frozenset(
    {
        "import_port_type",
        "import_serializable_type",
        "import_component_type",
        "import_enum_type",
        "import_array_type",
        "import_dictionary",
    }
)

# Imports of plain headers carry no module dependency
IGNORED_SUFFIXES = (".hpp", ".h")


class XmlDependencyMiner:
    """Mines import_* elements of a descriptor.

    Each import names a descriptor relative to the project root
    ('Fw/Cmd/CmdPortAi.xml'); the dependency is the directory declaring it
    ('Fw/Cmd').
    """

    def mine(
        self,
        descriptor: Path,
        module: ModuleId,
        kind: DescriptorKind,
    ) -> tuple[str, ...]:
        """Module identifiers referenced by descriptor, in document order.

        Raises:
            ConfigurationError: If descriptor cannot be parsed
        """
        try:
            tree = ET.parse(descriptor)
        except (OSError, ET.ParseError) as e:
            raise ConfigurationError(f"cannot mine dependencies of {descriptor}: {e}") from e

        identifiers: dict[str, None] = {}
        for element in tree.getroot().iter():
            if element.tag not in IMPORT_ELEMENTS or not element.text:
                continue
            reference = element.text.strip()
            if not reference or reference.endswith(IGNORED_SUFFIXES):
                continue
            directory = PurePosixPath(reference).parent
            if directory.parts:
                identifiers[directory.as_posix()] = None

        _log.debug(
            "%s (%s of %s): %d dependency reference(s)",
            descriptor.name,
            kind.generator_name,
            module.name,
            len(identifiers),
        )
        return tuple(identifiers)
