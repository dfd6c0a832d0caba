"""Tests for presentation/manifest.py."""

from pathlib import Path

import pytest

from modforge.domain.exceptions.configuration import ConfigurationError
from modforge.domain.model.enums import BuildType, OutputPolicy, TargetKind
from modforge.presentation.manifest import load_manifest

MANIFEST = """
[build]
project_root = "src"
output_policy = "source-tree"
platform = "Darwin"
compile_definitions = ["FW_DEBUG=1"]
codegen_target = "codegen"

[generator]
command = ["fpp-gen", "--kind={kind}", "{descriptor}"]
mode = "run"

[[module]]
location = "Fw/Cmd"
inputs = ["CmdPortAi.xml", "CmdString.cpp"]

[[module]]
location = "Ref"
kind = "executable"
inputs = ["Main.cpp"]
dependencies = ["Fw/Cmd", "-lm"]
exclude_from_all = true
"""


def write_manifest(directory: Path, content: str) -> Path:
    path = directory / "modforge.toml"
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadManifest:
    """Tests for load_manifest."""

    def test_full_manifest(self, tmp_path: Path) -> None:
        manifest = load_manifest(write_manifest(tmp_path, MANIFEST), environ={})

        config = manifest.config
        assert config.project_root == tmp_path.absolute() / "src"
        assert config.build_root == tmp_path.absolute() / "src" / "build"
        assert config.output_policy is OutputPolicy.SOURCE_TREE
        assert config.platform == "Darwin"
        assert config.compile_definitions == ("FW_DEBUG=1",)
        assert config.codegen_target == "codegen"
        assert manifest.generator_command == ("fpp-gen", "--kind={kind}", "{descriptor}")
        assert manifest.generator_mode == "run"

        cmd, ref = manifest.modules
        assert cmd.location == "Fw/Cmd"
        assert cmd.target_kind is TargetKind.LIBRARY
        assert cmd.inputs == ("CmdPortAi.xml", "CmdString.cpp")
        assert cmd.exclude_from_all is False
        assert ref.target_kind is TargetKind.EXECUTABLE
        assert ref.dependencies == ("Fw/Cmd", "-lm")
        assert ref.exclude_from_all is True

    def test_defaults(self, tmp_path: Path) -> None:
        manifest = load_manifest(
            write_manifest(tmp_path, '[generator]\ncommand = ["gen"]\n'), environ={}
        )

        assert manifest.config.project_root == tmp_path.absolute()
        assert manifest.config.build_root == tmp_path.absolute() / "build"
        assert manifest.config.output_policy is OutputPolicy.BUILD_TREE
        assert manifest.generator_mode == "deferred"
        assert manifest.modules == ()

    def test_environment_fills_gaps(self, tmp_path: Path) -> None:
        manifest = load_manifest(
            write_manifest(tmp_path, '[generator]\ncommand = ["gen"]\n'),
            environ={"MODFORGE_PROJECT_ROOT": "/work/app", "MODFORGE_BUILD_TYPE": "testing"},
        )

        assert manifest.config.project_root == Path("/work/app")
        assert manifest.config.build_type is BuildType.TESTING

    def test_overrides_win(self, tmp_path: Path) -> None:
        manifest = load_manifest(
            write_manifest(tmp_path, '[build]\nbuild_type = "normal"\n[generator]\ncommand = ["gen"]\n'),
            environ={},
            build_type=BuildType.TESTING,
        )

        assert manifest.config.build_type is BuildType.TESTING

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="cannot read manifest"):
            load_manifest(tmp_path / "absent.toml", environ={})

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not valid TOML"):
            load_manifest(write_manifest(tmp_path, "[build\n"), environ={})

    def test_missing_generator_command_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="command must not be empty"):
            load_manifest(write_manifest(tmp_path, "[generator]\n"), environ={})

    def test_unknown_mode_raises(self, tmp_path: Path) -> None:
        content = '[generator]\ncommand = ["gen"]\nmode = "later"\n'
        with pytest.raises(ConfigurationError, match="mode must be one of"):
            load_manifest(write_manifest(tmp_path, content), environ={})

    def test_unknown_kind_raises(self, tmp_path: Path) -> None:
        content = '[generator]\ncommand = ["gen"]\n[[module]]\nlocation = "A"\nkind = "plugin"\n'
        with pytest.raises(ConfigurationError, match="unknown TargetKind 'plugin'"):
            load_manifest(write_manifest(tmp_path, content), environ={})

    def test_module_without_location_raises(self, tmp_path: Path) -> None:
        content = '[generator]\ncommand = ["gen"]\n[[module]]\ninputs = ["a.cpp"]\n'
        with pytest.raises(ConfigurationError, match="'location' must be a non-empty string"):
            load_manifest(write_manifest(tmp_path, content), environ={})

    def test_inputs_must_be_strings(self, tmp_path: Path) -> None:
        content = '[generator]\ncommand = ["gen"]\n[[module]]\nlocation = "A"\ninputs = [1]\n'
        with pytest.raises(ConfigurationError, match="'inputs' must be a list of strings"):
            load_manifest(write_manifest(tmp_path, content), environ={})
