"""Dependency resolution: mined and declared edges into a module's set."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modforge.domain.exceptions.configuration import ConfigurationError
from modforge.domain.exceptions.dependency import UnresolvedDependency
from modforge.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from modforge.application.context import ConfigurationContext
    from modforge.domain.model.descriptor import Descriptor
    from modforge.domain.model.module import Module
    from modforge.domain.model.module_id import ModuleId
    from modforge.domain.ports.locator import ModuleLocatorPort
    from modforge.domain.ports.miner import DependencyMinerPort

_log = get_logger("resolver")


class DependencyResolver:
    """Maps dependency identifiers to modules and merges the edges.

    Resolution order for an identifier:
    1. Module already in the registry (by name, 'Fw/Cmd' also tried as 'Fw_Cmd')
    2. Location found by the locator; newly discovered modules are declared
       and must be assembled before the pass is finalized

    Merging keeps the first occurrence of every target.
    """

    def __init__(
        self,
        context: ConfigurationContext,
        miner: DependencyMinerPort,
        locator: ModuleLocatorPort | None = None,
    ) -> None:
        self._context = context
        self._miner = miner
        self._locator = locator

    def resolve(self, module: Module, identifier: str) -> ModuleId:
        """Target module of identifier.

        Raises:
            UnresolvedDependency: If identifier maps to no module
        """
        registry = self._context.registry
        for name in _candidate_names(identifier):
            known = registry.lookup(name)
            if known is not None:
                return known

        if self._locator is not None:
            location = self._locator.locate(identifier)
            if location is not None:
                try:
                    discovered = registry.declare(location)
                except ConfigurationError as e:
                    raise UnresolvedDependency(module.name, identifier, e.reason) from e
                _log.debug("Discovered module %s for '%s'", discovered.name, identifier)
                return discovered

        raise UnresolvedDependency(module.name, identifier)

    def resolve_mined(self, module: Module, descriptor: Descriptor) -> tuple[ModuleId, ...]:
        """Merge dependencies referenced by descriptor into module.

        References to the module itself are skipped: descriptors routinely
        import types declared next to them.

        Returns:
            Targets that were newly added, in order
        """
        identifiers = self._miner.mine(descriptor.path, module.id, descriptor.kind)
        added: list[ModuleId] = []
        for identifier in identifiers:
            target = self.resolve(module, identifier)
            if target == module.id:
                continue
            if module.depend_on(target):
                added.append(target)
                _log.debug("%s: mined dependency on %s", module.name, target.name)
        return tuple(added)

    def resolve_declared(
        self,
        module: Module,
        modules: Iterable[str] = (),
        link_flags: Iterable[str] = (),
    ) -> None:
        """Merge hand-authored dependencies into module.

        Link flags are merged first, matching the link order of the
        declaration.

        Raises:
            UnresolvedDependency: If a module identifier maps to no module
            ConfigurationError: If module declares a dependency on itself
        """
        for flag in link_flags:
            module.link_with(flag)

        for identifier in modules:
            target = self.resolve(module, identifier)
            if target == module.id:
                raise ConfigurationError(f"module '{module.name}' declares a dependency on itself")
            if module.depend_on(target):
                _log.debug("%s: declared dependency on %s", module.name, target.name)


def _candidate_names(identifier: str) -> tuple[str, ...]:
    """Registry names an identifier may refer to."""
    stripped = identifier.strip().strip("/")
    canonical = "_".join(part for part in stripped.split("/") if part)
    if canonical == stripped:
        return (stripped,)
    return (stripped, canonical)
