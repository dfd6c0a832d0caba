"""Tests for application/session.py."""

from pathlib import Path

import pytest

from modforge.domain.exceptions.artifact import GenerationError
from modforge.domain.exceptions.configuration import ConfigurationError
from modforge.domain.exceptions.dependency import DependencyCycleError, UnresolvedDependency
from modforge.domain.exceptions.descriptor import UnknownDescriptorType
from modforge.domain.model.enums import BuildType, TargetKind
from tests.factories import RecordingGenerator, make_config, make_session


class TestConfigure:
    """Tests for configuring single modules."""

    def test_library_with_descriptor_and_source(self) -> None:
        session = make_session()

        unit = session.add_library("Fw/Cmd", ["CmdPortAi.xml", "CmdString.cpp"])

        assert unit.name == "Fw_Cmd"
        assert unit.target_kind is TargetKind.LIBRARY
        assert unit.sources == (
            Path("/proj/Fw/Cmd/CmdString.cpp"),
            Path("/proj/build/Fw/Cmd/CmdPortAc.cpp"),
            Path("/proj/build/Fw/Cmd/CmdPortAc.hpp"),
        )

    def test_executable(self) -> None:
        session = make_session()
        unit = session.add_executable("Ref", ["Main.cpp"])
        assert unit.target_kind is TargetKind.EXECUTABLE

    def test_mined_and_declared_dependency_merged(self) -> None:
        session = make_session(references={"HealthComponentAi.xml": ("Fw/Cmd",)})
        session.add_library("Fw/Cmd", ["CmdPortAi.xml"])

        unit = session.add_library("Svc/Health", ["HealthComponentAi.xml"], ["Fw/Cmd", "-lm"])

        assert [getattr(item, "name", item) for item in unit.links] == ["Fw_Cmd", "-lm"]

    def test_unknown_descriptor_type_registers_no_unit(self) -> None:
        session = make_session()

        with pytest.raises(UnknownDescriptorType):
            session.add_library("Svc/Bad", ["BadAi.xml"])

        assert not session.context.is_assembled("Svc_Bad")

    def test_descriptor_without_marker_registers_no_unit(self) -> None:
        session = make_session()

        with pytest.raises(UnknownDescriptorType, match="does not end with"):
            session.add_library("Svc/Bad", ["FooComponent.xml", "Foo.cpp"])

        assert not session.context.is_assembled("Svc_Bad")

    def test_generation_failure_registers_no_unit(self) -> None:
        session = make_session(generator=RecordingGenerator(frozenset({"HealthComponentAi.xml"})))

        with pytest.raises(GenerationError, match="generator crashed"):
            session.add_library("Svc/Health", ["HealthComponentAi.xml"])

        assert not session.context.is_assembled("Svc_Health")

    def test_configured_twice_raises(self) -> None:
        session = make_session()
        session.add_library("Svc/Health", ["Health.cpp"])

        with pytest.raises(ConfigurationError, match="configured twice"):
            session.add_library("Svc/Health/", ["Health.cpp"])

    def test_clashing_module_name_raises(self) -> None:
        session = make_session()
        session.declare("Svc/Cmd_Seq")

        with pytest.raises(ConfigurationError, match="both map to module name"):
            session.add_library("Svc_Cmd/Seq", ["Seq.cpp"])

        assert not session.context.is_assembled("Svc_Cmd_Seq")

    def test_unresolved_dependency(self) -> None:
        session = make_session()

        with pytest.raises(UnresolvedDependency, match="Nope/Missing"):
            session.add_library("Svc/Health", ["Health.cpp"], ["Nope/Missing"])

    def test_testing_build_type_not_installed(self) -> None:
        session = make_session(make_config(build_type=BuildType.TESTING))
        unit = session.add_library("Svc/Health", ["Health.cpp"])
        assert unit.install is None


class TestFinalize:
    """Tests for building the plan."""

    def test_order_dependencies_first(self) -> None:
        session = make_session(known={"Fw/Cmd": "Fw/Cmd"})
        session.add_library("Svc/Health", ["Health.cpp"], ["Fw/Cmd"])
        session.add_library("Fw/Cmd", ["Cmd.cpp"])

        plan = session.finalize()

        assert plan.order == ("Fw_Cmd", "Svc_Health")
        assert plan.graph.has_edge("Svc_Health", "Fw_Cmd")

    def test_discovered_but_never_configured_raises(self) -> None:
        session = make_session(known={"Fw/Cmd": "Fw/Cmd"})
        session.add_library("Svc/Health", ["Health.cpp"], ["Fw/Cmd"])

        with pytest.raises(UnresolvedDependency, match="never configured"):
            session.finalize()

    def test_cycle_raises(self) -> None:
        session = make_session(known={"Svc/B": "Svc/B"})
        session.add_library("Svc/A", ["A.cpp"], ["Svc/B"])
        session.add_library("Svc/B", ["B.cpp"], ["Svc/A"])

        with pytest.raises(DependencyCycleError):
            session.finalize()

    def test_configure_depends_collected(self) -> None:
        session = make_session()
        session.add_library("Fw/Cmd", ["CmdPortAi.xml"])

        plan = session.finalize()

        assert plan.configure_depends == (Path("/proj/Fw/Cmd/CmdPortAi.xml"),)

    def test_empty_session(self) -> None:
        plan = make_session().finalize()
        assert plan.order == ()
        assert plan.units == {}
