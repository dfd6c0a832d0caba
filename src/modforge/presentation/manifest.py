"""Module manifest loading (modforge.toml)."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TypeVar

from modforge.domain.exceptions.configuration import ConfigurationError
from modforge.domain.model.configuration import BuildConfig
from modforge.domain.model.enums import BuildType, OutputPolicy, TargetKind

GENERATOR_MODES = ("deferred", "run")


@dataclass(frozen=True, slots=True)
class ModuleEntry:
    """One [[module]] table.

    Attributes:
        location: Declaring directory relative to project root
        target_kind: Library or executable
        inputs: Descriptors and literal sources
        dependencies: Module identifiers and link flags
        exclude_from_all: Keep out of default build and install
    """

    location: str
    target_kind: TargetKind
    inputs: tuple[str, ...]
    dependencies: tuple[str, ...] = ()
    exclude_from_all: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.location:
            raise ConfigurationError("module location must not be empty")


@dataclass(frozen=True, slots=True)
class Manifest:
    """Parsed manifest.

    Attributes:
        config: Build configuration (manifest values over environment)
        generator_command: Generator argument vector
        generator_mode: 'deferred' (build rule) or 'run' (now)
        modules: Module declarations in file order
    """

    config: BuildConfig
    generator_command: tuple[str, ...]
    generator_mode: str
    modules: tuple[ModuleEntry, ...]


def load_manifest(
    path: Path,
    environ: Mapping[str, str] | None = None,
    **overrides: object,
) -> Manifest:
    """Load manifest from disk.

    Paths in [build] are relative to the manifest's directory, which is
    also the project root unless [build] or MODFORGE_PROJECT_ROOT names one.

    Raises:
        ConfigurationError: If file is missing, malformed or incomplete
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"cannot read manifest {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"manifest {path} is not valid TOML: {e}") from e

    env = os.environ if environ is None else environ
    base = path.parent.absolute()
    build = _table(data, "build")
    generator = _table(data, "generator")

    values: dict[str, object] = {}
    if "project_root" in build:
        values["project_root"] = Path(os.path.normpath(base / _str(build, "project_root")))
    elif not env.get("MODFORGE_PROJECT_ROOT"):
        values["project_root"] = base
    if "build_root" in build:
        values["build_root"] = Path(os.path.normpath(base / _str(build, "build_root")))
    if "output_policy" in build:
        values["output_policy"] = _enum(OutputPolicy, _str(build, "output_policy"))
    if "build_type" in build:
        values["build_type"] = _enum(BuildType, _str(build, "build_type"))
    if "platform" in build:
        values["platform"] = _str(build, "platform")
    if "codegen_target" in build:
        values["codegen_target"] = _str(build, "codegen_target")
    if "compile_definitions" in build:
        values["compile_definitions"] = _str_tuple(build, "compile_definitions")
    if (
        "project_root" in values
        and "build_root" not in values
        and not env.get("MODFORGE_BUILD_ROOT")
    ):
        values["build_root"] = Path(str(values["project_root"])) / "build"
    values.update(overrides)

    config = BuildConfig.from_env(env, **values)

    command = _str_tuple(generator, "command")
    if not command:
        raise ConfigurationError("[generator] command must not be empty")
    mode = str(generator.get("mode", "deferred"))
    if mode not in GENERATOR_MODES:
        raise ConfigurationError(f"[generator] mode must be one of {', '.join(GENERATOR_MODES)}")

    raw_modules = data.get("module", [])
    if not isinstance(raw_modules, list):
        raise ConfigurationError("[[module]] must be an array of tables")

    modules = tuple(_module_entry(raw) for raw in raw_modules)
    return Manifest(
        config=config,
        generator_command=command,
        generator_mode=mode,
        modules=modules,
    )


def _module_entry(raw: object) -> ModuleEntry:
    if not isinstance(raw, dict):
        raise ConfigurationError("each [[module]] must be a table")
    return ModuleEntry(
        location=_str(raw, "location"),
        target_kind=_enum(TargetKind, str(raw.get("kind", TargetKind.LIBRARY.value))),
        inputs=_str_tuple(raw, "inputs"),
        dependencies=_str_tuple(raw, "dependencies"),
        exclude_from_all=bool(raw.get("exclude_from_all", False)),
    )


def _table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigurationError(f"[{key}] must be a table")
    return value


def _str(data: Mapping[str, object], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"'{key}' must be a non-empty string")
    return value


def _str_tuple(data: Mapping[str, object], key: str) -> tuple[str, ...]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigurationError(f"'{key}' must be a list of strings")
    return tuple(value)


E = TypeVar("E", bound=Enum)


def _enum(enum_type: type[E], raw: str) -> E:
    for member in enum_type:
        if member.value == raw.lower():
            return member
    allowed = ", ".join(member.value for member in enum_type)
    raise ConfigurationError(f"unknown {enum_type.__name__} '{raw}' (expected one of: {allowed})")
