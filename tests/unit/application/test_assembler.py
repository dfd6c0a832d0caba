"""Tests for application/assembler.py."""

import hashlib
from pathlib import Path

import pytest

from modforge.application.assembler import ModuleAssembler, file_id
from modforge.domain.exceptions.configuration import ConfigurationError, ModuleFinalizedError
from modforge.domain.model.enums import BuildType, TargetKind
from modforge.domain.model.install import InstallRule
from tests.factories import (
    PROJECT_ROOT,
    make_artifact,
    make_config,
    make_context,
    make_module,
    make_module_id,
)


class TestFileId:
    """Tests for per-source file ids."""

    def test_md5_prefix_of_relative_path(self) -> None:
        expected = int(hashlib.md5(b"Svc/Health/Health.cpp").hexdigest()[:8], 16)
        assert file_id(Path("/proj/Svc/Health/Health.cpp"), PROJECT_ROOT) == expected

    def test_fits_32_bits(self) -> None:
        assert 0 <= file_id(Path("/elsewhere/x.cpp"), PROJECT_ROOT) < 2**32


class TestSources:
    """Tests for source aggregation."""

    def test_placeholder_stripped_when_sources_exist(self) -> None:
        context = make_context()
        module = make_module("Svc/Health")
        module.add_source(Path("/proj/Svc/Health/Health.cpp"))

        unit = ModuleAssembler(context).assemble(module)

        assert unit.sources == (Path("/proj/Svc/Health/Health.cpp"),)
        assert context.config.placeholder_source not in unit.sources

    def test_placeholder_kept_without_sources(self) -> None:
        context = make_context()

        unit = ModuleAssembler(context).assemble(make_module("Svc/Empty"))

        assert unit.sources == (Path("/proj/build/empty.c"),)

    def test_literal_then_generated(self) -> None:
        context = make_context()
        module = make_module("Svc/Health")
        artifact = make_artifact()
        module.add_source(Path("/proj/Svc/Health/Health.cpp"))
        module.add_artifact(artifact)

        unit = ModuleAssembler(context).assemble(module)

        assert unit.sources == (
            Path("/proj/Svc/Health/Health.cpp"),
            artifact.source,
            artifact.header,
        )
        assert unit.artifacts == (artifact,)
        assert unit.configure_depends == (artifact.descriptor.path,)

    def test_every_source_has_file_id(self) -> None:
        context = make_context()
        module = make_module("Svc/Health")
        module.add_artifact(make_artifact())

        unit = ModuleAssembler(context).assemble(module)

        assert set(unit.file_ids) == set(unit.sources)


class TestLinksAndOrder:
    """Tests for links and order dependencies."""

    def test_links_follow_dependency_order(self) -> None:
        context = make_context()
        module = make_module("Svc/Health")
        cmd = make_module_id("Fw/Cmd")
        module.depend_on(cmd)
        module.link_with("-lm")

        unit = ModuleAssembler(context).assemble(module)

        assert unit.links == (cmd, "-lm")
        assert unit.order_dependencies == ("Fw_Cmd",)

    def test_codegen_target_ordered_first(self) -> None:
        context = make_context(make_config(codegen_target="codegen"))
        module = make_module("Svc/Health")
        module.depend_on(make_module_id("Fw/Cmd"))

        unit = ModuleAssembler(context).assemble(module)

        assert unit.order_dependencies == ("codegen", "Fw_Cmd")

    def test_compile_definitions_applied(self) -> None:
        context = make_context(make_config(compile_definitions=("FW_DEBUG=1",)))

        unit = ModuleAssembler(context).assemble(make_module())

        assert unit.compile_definitions == ("FW_DEBUG=1",)


class TestInstall:
    """Tests for install registration."""

    def test_installed_by_default(self) -> None:
        unit = ModuleAssembler(make_context()).assemble(make_module())
        assert unit.install == InstallRule.for_platform("Linux")

    def test_excluded_not_installed(self) -> None:
        unit = ModuleAssembler(make_context()).assemble(make_module(exclude_from_all=True))
        assert unit.install is None

    def test_testing_build_not_installed(self) -> None:
        unit = ModuleAssembler(make_context()).assemble(
            make_module(build_type=BuildType.TESTING, exclude_from_all=False)
        )
        assert unit.install is None

    def test_platform_in_destinations(self) -> None:
        unit = ModuleAssembler(make_context(make_config(platform="Darwin"))).assemble(make_module())
        assert unit.install is not None
        assert unit.install.runtime == "bin/Darwin"


class TestFinalization:
    """Tests for registration and freezing."""

    def test_registers_and_finalizes(self) -> None:
        context = make_context()
        module = make_module("Svc/Health", target_kind=TargetKind.EXECUTABLE)

        unit = ModuleAssembler(context).assemble(module)

        assert context.is_assembled("Svc_Health")
        assert unit.target_kind is TargetKind.EXECUTABLE
        assert module.is_finalized
        with pytest.raises(ModuleFinalizedError):
            module.add_source(Path("/proj/late.cpp"))

    def test_assemble_twice_raises(self) -> None:
        context = make_context()
        module = make_module()
        ModuleAssembler(context).assemble(module)

        with pytest.raises(ModuleFinalizedError):
            ModuleAssembler(context).assemble(module)

    def test_same_name_twice_raises(self) -> None:
        context = make_context()
        ModuleAssembler(context).assemble(make_module("Svc/Health"))

        with pytest.raises(ConfigurationError, match="assembled twice"):
            ModuleAssembler(context).assemble(make_module("Svc/Health"))
