"""End-to-end configuration pass with the XML adapters and a real generator process."""

import sys
from pathlib import Path

import pytest

from modforge.application.session import ConfigurationSession
from modforge.domain.exceptions.artifact import ArtifactNameCollision
from modforge.domain.model.configuration import BuildConfig
from modforge.domain.model.enums import OutputPolicy
from modforge.infrastructure.generator import SubprocessGenerator
from modforge.infrastructure.locator import SourceTreeLocator
from modforge.infrastructure.miner import XmlDependencyMiner
from modforge.infrastructure.type_inference import XmlTypeInference

# argv = kind, source, header, descriptor
GENERATOR = (
    sys.executable,
    "-c",
    "import sys, pathlib; "
    "[pathlib.Path(p).write_text('// generated from ' + sys.argv[4]) for p in sys.argv[2:4]]",
)

FILES = {
    "Fw/Types/ResultEnumAi.xml": '<enum name="Result"><item name="OK"/></enum>',
    "Fw/Cmd/CmdPortAi.xml": (
        '<interface name="Cmd">'
        "<import_enum_type>Fw/Types/ResultEnumAi.xml</import_enum_type>"
        "</interface>"
    ),
    "Fw/Cmd/CmdArgsSerializableAi.xml": '<serializable name="CmdArgs"/>',
    "Svc/Health/HealthComponentAi.xml": (
        '<component name="Health" kind="active">'
        "<import_port_type>Fw/Cmd/CmdPortAi.xml</import_port_type>"
        "<import_serializable_type>Fw/Cmd/CmdArgsSerializableAi.xml</import_serializable_type>"
        "<import_port_type>Svc/Health/PingPortAi.xml</import_port_type>"
        "</component>"
    ),
    "Svc/Health/PingPortAi.xml": '<interface name="Ping"/>',
}


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path.resolve() / "project"
    for relative, content in FILES.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def make_session(root: Path, policy: OutputPolicy = OutputPolicy.BUILD_TREE) -> ConfigurationSession:
    return ConfigurationSession(
        BuildConfig(
            project_root=root,
            build_root=root / "build",
            output_policy=policy,
            codegen_target="codegen",
        ),
        generator=SubprocessGenerator(GENERATOR),
        inference=XmlTypeInference(),
        miner=XmlDependencyMiner(),
        locator=SourceTreeLocator((root,)),
    )


class TestConfigurationPass:
    """Full pass over a small source tree."""

    def test_dependants_configured_before_dependencies(self, project: Path) -> None:
        session = make_session(project)
        session.add_library("Svc/Health", ["HealthComponentAi.xml", "PingPortAi.xml"], ["-lpthread"])
        session.add_library("Fw/Cmd", ["CmdPortAi.xml", "CmdArgsSerializableAi.xml"])
        session.add_library("Fw/Types", ["ResultEnumAi.xml"])

        plan = session.finalize()

        assert plan.order == ("Fw_Types", "Fw_Cmd", "Svc_Health")
        health = plan.units["Svc_Health"]
        assert [getattr(item, "name", item) for item in health.links] == ["Fw_Cmd", "-lpthread"]
        assert health.order_dependencies == ("codegen", "Fw_Cmd")
        assert [getattr(item, "name", item) for item in plan.link_closure("Svc_Health")] == [
            "Fw_Cmd",
            "-lpthread",
            "Fw_Types",
        ]

    def test_generated_files_written_to_build_tree(self, project: Path) -> None:
        session = make_session(project)
        session.add_library("Fw/Types", ["ResultEnumAi.xml"])

        unit = session.finalize().units["Fw_Types"]

        header = project / "build" / "Fw" / "Types" / "ResultEnumAc.hpp"
        source = project / "build" / "Fw" / "Types" / "ResultEnumAc.cpp"
        assert unit.sources == (source, header)
        assert header.read_text().startswith("// generated from ")
        assert source.exists()

    def test_source_tree_policy(self, project: Path) -> None:
        session = make_session(project, OutputPolicy.SOURCE_TREE)
        session.add_library("Fw/Types", ["ResultEnumAi.xml"])

        session.finalize()

        assert (project / "Fw" / "Types" / "ResultEnumAc.hpp").exists()

    def test_every_descriptor_is_configure_dependency(self, project: Path) -> None:
        session = make_session(project)
        session.add_library("Fw/Types", ["ResultEnumAi.xml"])
        session.add_library("Fw/Cmd", ["CmdPortAi.xml", "CmdArgsSerializableAi.xml"])

        plan = session.finalize()

        assert set(plan.configure_depends) == {
            project / "Fw/Types/ResultEnumAi.xml",
            project / "Fw/Cmd/CmdPortAi.xml",
            project / "Fw/Cmd/CmdArgsSerializableAi.xml",
        }

    def test_collision_across_directories_is_fatal(self, project: Path) -> None:
        legacy = project / "Fw" / "Types" / "legacy"
        legacy.mkdir()
        (legacy / "ResultEnumAi.xml").write_text('<enum name="Result"/>', encoding="utf-8")
        session = make_session(project)

        with pytest.raises(ArtifactNameCollision):
            session.add_library("Fw/Types", ["ResultEnumAi.xml", "legacy/ResultEnumAi.xml"])

        assert not session.context.is_assembled("Fw_Types")
