"""Code generator adapters: run now, or schedule for the build tool."""

from __future__ import annotations

import re
import subprocess
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from modforge.domain.exceptions.artifact import GenerationError
from modforge.domain.model.generation import GenerationRule
from modforge.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from modforge.domain.model.enums import DescriptorKind

_log = get_logger("infrastructure.generator")

PLACEHOLDER = re.compile(r"\{(?:kind|descriptor|header|source)\}")


def expand_command(
    command: Sequence[str],
    kind: DescriptorKind,
    descriptor: Path,
    header: Path,
    source: Path,
) -> tuple[str, ...]:
    """Fill {kind} {descriptor} {header} {source} into command.

    Other braces are kept literally. A command without placeholders gets
    kind, source, header and descriptor appended in that order.
    """
    if not command:
        raise ValueError("command must not be empty")

    values = {
        "{kind}": kind.generator_name,
        "{descriptor}": str(descriptor),
        "{header}": str(header),
        "{source}": str(source),
    }
    if not any(PLACEHOLDER.search(arg) for arg in command):
        return (
            *command,
            values["{kind}"],
            values["{source}"],
            values["{header}"],
            values["{descriptor}"],
        )

    return tuple(PLACEHOLDER.sub(lambda match: values[match.group(0)], arg) for arg in command)


class SubprocessGenerator:
    """Runs the generator immediately, once per descriptor."""

    def __init__(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        if not command:
            raise ValueError("command must not be empty")
        self._command = tuple(command)
        self._cwd = cwd
        self._env = dict(env) if env is not None else None

    def generate(
        self,
        kind: DescriptorKind,
        descriptor: Path,
        header: Path,
        source: Path,
    ) -> GenerationRule | None:
        """Run generator and wait for it.

        Raises:
            GenerationError: If the command cannot start or exits non-zero
        """
        argv = expand_command(self._command, kind, descriptor, header, source)
        header.parent.mkdir(parents=True, exist_ok=True)
        source.parent.mkdir(parents=True, exist_ok=True)
        _log.debug("Running %s", " ".join(argv))

        try:
            completed = subprocess.run(
                argv,
                cwd=self._cwd,
                env=self._env,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise GenerationError(descriptor, f"cannot run {argv[0]}: {e}") from e

        if completed.returncode != 0:
            detail = completed.stderr.strip() or completed.stdout.strip() or "no output"
            raise GenerationError(descriptor, f"exit status {completed.returncode}: {detail}")
        return None


class DeferredGenerator:
    """Schedules the generator as a build rule instead of running it.

    Files are produced lazily by the build tool; the rule reruns when the
    descriptor changes.
    """

    def __init__(self, command: Sequence[str]) -> None:
        if not command:
            raise ValueError("command must not be empty")
        self._command = tuple(command)
        self._rules: list[GenerationRule] = []

    @property
    def rules(self) -> tuple[GenerationRule, ...]:
        """Every rule scheduled so far."""
        return tuple(self._rules)

    def generate(
        self,
        kind: DescriptorKind,
        descriptor: Path,
        header: Path,
        source: Path,
    ) -> GenerationRule | None:
        """Record a rule producing header and source."""
        rule = GenerationRule(
            command=expand_command(self._command, kind, descriptor, header, source),
            descriptor=descriptor,
            outputs=(header, source),
        )
        self._rules.append(rule)
        return rule
