"""Build configuration surface.

Immutable settings shared by every module of a configuration pass.
Read from the environment by from_env(), or constructed directly.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TypeVar

from modforge.domain.exceptions.configuration import ConfigurationError
from modforge.domain.model.enums import BuildType, OutputPolicy

ENV_PREFIX = "MODFORGE_"

# Inserted so library targets never start with zero sources
DEFAULT_PLACEHOLDER = "empty.c"


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Configuration DTO with FAIL-FIRST validation.

    Attributes:
        project_root: Root that module identities are derived from
        build_root: Root of the build tree (build-tree artifacts, placeholder)
        output_policy: Where generated artifacts are written
        build_type: NORMAL or TESTING (TESTING never installs)
        compile_definitions: Definitions applied to every source of every module
        platform: Platform name used in install destinations
        codegen_target: Build target every module must be ordered after. None = none.
        placeholder_name: File name of the empty placeholder source
    """

    project_root: Path
    build_root: Path
    output_policy: OutputPolicy = OutputPolicy.BUILD_TREE
    build_type: BuildType = BuildType.NORMAL
    compile_definitions: tuple[str, ...] = ()
    platform: str = "Linux"
    codegen_target: str | None = None
    placeholder_name: str = DEFAULT_PLACEHOLDER

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.project_root.is_absolute():
            raise ConfigurationError(f"project_root must be absolute, got {self.project_root}")
        if not self.build_root.is_absolute():
            raise ConfigurationError(f"build_root must be absolute, got {self.build_root}")
        if not self.platform:
            raise ConfigurationError("platform must not be empty")
        if not self.placeholder_name:
            raise ConfigurationError("placeholder_name must not be empty")
        for definition in self.compile_definitions:
            if not definition or definition.startswith("="):
                raise ConfigurationError(f"malformed compile definition '{definition}'")

    @property
    def is_testing(self) -> bool:
        """True for test-only builds."""
        return self.build_type is BuildType.TESTING

    @property
    def placeholder_source(self) -> Path:
        """Absolute path of the shared placeholder source."""
        return self.build_root / self.placeholder_name

    def binary_dir(self, location: Path) -> Path:
        """Build-tree directory mirroring a source-tree location."""
        return self.build_root / location.relative_to(self.project_root)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: object,
    ) -> BuildConfig:
        """Build configuration from MODFORGE_* variables.

        Variables:
            MODFORGE_PROJECT_ROOT: defaults to current directory
            MODFORGE_BUILD_ROOT: defaults to <project_root>/build
            MODFORGE_OUTPUT_POLICY: source-tree | build-tree
            MODFORGE_BUILD_TYPE: normal | testing
            MODFORGE_PLATFORM: install platform name
            MODFORGE_COMPILE_DEFINITIONS: ';'-separated definitions
            MODFORGE_CODEGEN_TARGET: generator build target

        Keyword overrides win over the environment.

        Raises:
            ConfigurationError: If a value is not recognized
        """
        env = os.environ if environ is None else environ

        project_root = Path(os.path.abspath(env.get(f"{ENV_PREFIX}PROJECT_ROOT") or Path.cwd()))
        build_root = Path(
            os.path.abspath(env.get(f"{ENV_PREFIX}BUILD_ROOT") or project_root / "build")
        )

        values: dict[str, object] = {
            "project_root": project_root,
            "build_root": build_root,
            "output_policy": _parse_enum(
                OutputPolicy, env.get(f"{ENV_PREFIX}OUTPUT_POLICY"), OutputPolicy.BUILD_TREE
            ),
            "build_type": _parse_enum(BuildType, env.get(f"{ENV_PREFIX}BUILD_TYPE"), BuildType.NORMAL),
            "compile_definitions": tuple(
                item.strip()
                for item in env.get(f"{ENV_PREFIX}COMPILE_DEFINITIONS", "").split(";")
                if item.strip()
            ),
            "platform": env.get(f"{ENV_PREFIX}PLATFORM") or "Linux",
            "codegen_target": env.get(f"{ENV_PREFIX}CODEGEN_TARGET") or None,
        }
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]


E = TypeVar("E", bound=Enum)


def _parse_enum(enum_type: type[E], raw: str | None, default: E) -> E:
    """Parse enum by value, case-insensitive."""
    if raw is None or not raw.strip():
        return default
    wanted = raw.strip().lower()
    for member in enum_type:
        if member.value == wanted:
            return member
    allowed = ", ".join(member.value for member in enum_type)
    raise ConfigurationError(f"unknown {enum_type.__name__} '{raw}' (expected one of: {allowed})")
