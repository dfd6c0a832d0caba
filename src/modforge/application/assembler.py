"""Module assembly: one compiled unit per configured module."""

from __future__ import annotations

import hashlib
from types import MappingProxyType
from typing import TYPE_CHECKING

from modforge.domain.exceptions.configuration import ModuleFinalizedError
from modforge.domain.model.compiled_unit import CompiledUnit
from modforge.domain.model.enums import BuildType
from modforge.domain.model.install import InstallRule
from modforge.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from modforge.application.context import ConfigurationContext
    from modforge.domain.model.module import Module

_log = get_logger("assembler")


def file_id(path: Path, project_root: Path) -> int:
    """Deterministic 32-bit id of a source, from its project-relative path."""
    try:
        key = path.relative_to(project_root).as_posix()
    except ValueError:
        key = path.as_posix()
    return int(hashlib.md5(key.encode("utf-8")).hexdigest()[:8], 16)


class ModuleAssembler:
    """Aggregates a module into a CompiledUnit and registers it.

    Sources: literal sources, then each generated (source, header) pair.
    The placeholder source lets a library start out with zero sources and
    is removed once real sources exist.
    """

    def __init__(self, context: ConfigurationContext) -> None:
        self._context = context

    def assemble(self, module: Module) -> CompiledUnit:
        """Finalize module and register its unit in the context.

        Raises:
            ModuleFinalizedError: If module was already assembled
            ConfigurationError: If a unit with the same name exists
        """
        config = self._context.config
        if module.is_finalized:
            raise ModuleFinalizedError(module.name)

        sources = self._collect_sources(module)
        links = tuple(edge.target for edge in module.dependencies)

        order: list[str] = []
        if config.codegen_target is not None:
            order.append(config.codegen_target)
        order.extend(target.name for target in module.dependencies.modules)

        install = self._install_rule(module)

        unit = CompiledUnit(
            module=module.id,
            target_kind=module.target_kind,
            sources=sources,
            links=links,
            order_dependencies=tuple(order),
            compile_definitions=config.compile_definitions,
            file_ids=MappingProxyType(
                {path: file_id(path, config.project_root) for path in sources}
            ),
            install=install,
            configure_depends=tuple(artifact.descriptor.path for artifact in module.artifacts),
            artifacts=tuple(module.artifacts),
            generation_rules=self._context.generation_rules(module.id),
        )

        self._context.register_unit(unit)
        module.finalize()
        _log.info("Adding %s: %s", module.target_kind.value, module.name)
        return unit

    def _collect_sources(self, module: Module) -> tuple[Path, ...]:
        """Ordered unique sources with the placeholder stripped."""
        placeholder = self._context.config.placeholder_source
        staged: dict[Path, None] = dict.fromkeys(module.sources)
        staged[placeholder] = None
        for artifact in module.artifacts:
            staged[artifact.source] = None
            staged[artifact.header] = None

        if len(staged) > 1:
            del staged[placeholder]
        return tuple(staged)

    def _install_rule(self, module: Module) -> InstallRule | None:
        """Destinations, None for excluded modules and test builds."""
        if module.exclude_from_all:
            _log.debug("Not installing %s: excluded from all", module.name)
            return None
        if module.build_type is BuildType.TESTING:
            _log.debug("Not installing %s: testing build", module.name)
            return None
        return InstallRule.for_platform(self._context.config.platform)
