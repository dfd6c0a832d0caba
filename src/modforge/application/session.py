"""Configuration session: facade over a whole configuration pass.

Example:
    session = ConfigurationSession(
        BuildConfig.from_env(),
        generator=SubprocessGenerator(("fpp-codegen",)),
        inference=XmlTypeInference(),
        miner=XmlDependencyMiner(),
        locator=SourceTreeLocator((project_root,)),
    )
    session.add_library("Fw/Cmd", ["CmdPortAi.xml", "CmdString.cpp"])
    session.add_library("Svc/Health", ["HealthComponentAi.xml"], ["Fw/Cmd", "-lm"])
    plan = session.finalize()
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from modforge.application.assembler import ModuleAssembler
from modforge.application.classifier import classify_inputs, split_dependencies
from modforge.application.context import ConfigurationContext
from modforge.application.invoker import GeneratorInvoker
from modforge.application.namer import ArtifactNamer
from modforge.application.resolver import DependencyResolver
from modforge.domain.exceptions.configuration import ConfigurationError
from modforge.domain.exceptions.dependency import UnresolvedDependency
from modforge.domain.model.build_plan import BuildPlan
from modforge.domain.model.enums import TargetKind
from modforge.domain.model.graph import DiGraph
from modforge.domain.model.module import Module
from modforge.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from modforge.domain.model.compiled_unit import CompiledUnit
    from modforge.domain.model.configuration import BuildConfig
    from modforge.domain.model.module_id import ModuleId
    from modforge.domain.ports.generator import GeneratorPort
    from modforge.domain.ports.locator import ModuleLocatorPort
    from modforge.domain.ports.miner import DependencyMinerPort
    from modforge.domain.ports.type_inference import TypeInferencePort

_log = get_logger("session")


class ConfigurationSession:
    """Configures modules one by one and finalizes them into a BuildPlan.

    Each add_*() call runs the full pipeline for one module:
    classify -> generate (name, invoke) -> resolve -> assemble.
    Any error aborts that module: no unit is registered for it.
    """

    def __init__(
        self,
        config: BuildConfig,
        *,
        generator: GeneratorPort,
        inference: TypeInferencePort,
        miner: DependencyMinerPort,
        locator: ModuleLocatorPort | None = None,
    ) -> None:
        if config is None:
            raise TypeError("config must not be None")

        self._context = ConfigurationContext(config)
        self._invoker = GeneratorInvoker(self._context, ArtifactNamer(config), inference, generator)
        self._resolver = DependencyResolver(self._context, miner, locator)
        self._assembler = ModuleAssembler(self._context)

    @property
    def context(self) -> ConfigurationContext:
        """Shared state of this pass."""
        return self._context

    def declare(self, location: Path | str) -> ModuleId:
        """Identity of the module at location (created on first call)."""
        return self._context.registry.declare(self._absolute(location))

    def add_library(
        self,
        location: Path | str,
        inputs: Iterable[Path | str],
        dependencies: Iterable[str] = (),
        *,
        exclude_from_all: bool = False,
    ) -> CompiledUnit:
        """Configure a library module. See configure()."""
        return self.configure(
            location,
            inputs,
            dependencies,
            target_kind=TargetKind.LIBRARY,
            exclude_from_all=exclude_from_all,
        )

    def add_executable(
        self,
        location: Path | str,
        inputs: Iterable[Path | str],
        dependencies: Iterable[str] = (),
        *,
        exclude_from_all: bool = False,
    ) -> CompiledUnit:
        """Configure an executable module. See configure()."""
        return self.configure(
            location,
            inputs,
            dependencies,
            target_kind=TargetKind.EXECUTABLE,
            exclude_from_all=exclude_from_all,
        )

    def configure(
        self,
        location: Path | str,
        inputs: Iterable[Path | str],
        dependencies: Iterable[str] = (),
        *,
        target_kind: TargetKind = TargetKind.LIBRARY,
        exclude_from_all: bool = False,
    ) -> CompiledUnit:
        """Run the pipeline for the module declared at location.

        Args:
            location: Declaring directory (relative to project root or absolute)
            inputs: Descriptors and literal sources, relative to location
            dependencies: Module identifiers and link flags (-lm)
            target_kind: Library or executable
            exclude_from_all: Keep out of default build and install

        Returns:
            Compiled unit registered in the context

        Raises:
            ConfigurationError: If module was already configured
            UnknownDescriptorType: If a descriptor kind cannot be inferred
            ArtifactNameCollision: If generated paths collide
            GenerationError: If the generator fails
            UnresolvedDependency: If a dependency maps to no module
        """
        module_id = self.declare(location)
        if self._context.is_assembled(module_id.name):
            raise ConfigurationError(f"module '{module_id.name}' is configured twice")

        module = Module(
            id=module_id,
            target_kind=target_kind,
            build_type=self._context.config.build_type,
            exclude_from_all=exclude_from_all,
        )
        classified = classify_inputs(inputs)
        split = split_dependencies(dependencies)
        _log.debug(
            "Configuring %s: %d descriptor(s), %d source(s)",
            module.name,
            len(classified.descriptors),
            len(classified.sources),
        )

        for source in classified.sources:
            module.add_source(module_id.location / source)

        for path in classified.descriptors:
            artifact = self._invoker.invoke(module, path)
            self._resolver.resolve_mined(module, artifact.descriptor)

        self._resolver.resolve_declared(module, split.modules, split.link_flags)
        return self._assembler.assemble(module)

    def finalize(self) -> BuildPlan:
        """Check the whole graph and freeze it into a BuildPlan.

        Raises:
            UnresolvedDependency: If a depended-on module was never configured
            DependencyCycleError: If module dependencies form a cycle
        """
        units = self._context.units
        pending = {module_id.name for module_id in self._context.pending()}
        for unit in units.values():
            for target in unit.module_dependencies:
                if target.name in pending:
                    raise UnresolvedDependency(
                        unit.name, target.name, "module was discovered but never configured"
                    )

        graph = DiGraph.from_edges(
            (
                (unit.name, target.name)
                for unit in units.values()
                for target in unit.module_dependencies
            ),
            extra_nodes=units.keys(),
        )
        order = graph.topological_order()
        _log.info("Configured %d module(s)", len(order))

        return BuildPlan(
            units=units,
            order=order,
            configure_depends=self._context.configure_depends,
            graph=graph,
        )

    def _absolute(self, location: Path | str) -> Path:
        return self._context.config.project_root / Path(location)
