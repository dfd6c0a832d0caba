"""Command line entry point: configure every module of a manifest."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from modforge.application.session import ConfigurationSession
from modforge.domain.exceptions.base import ModForgeError
from modforge.domain.model.enums import BuildType
from modforge.infrastructure.generator import DeferredGenerator, SubprocessGenerator
from modforge.infrastructure.locator import SourceTreeLocator
from modforge.infrastructure.miner import XmlDependencyMiner
from modforge.infrastructure.type_inference import XmlTypeInference
from modforge.logging import configure_logging, get_logger
from modforge.presentation.console import ConsoleConfig, ConsoleReporter
from modforge.presentation.manifest import load_manifest

if TYPE_CHECKING:
    from collections.abc import Sequence

    from modforge.domain.model.build_plan import BuildPlan
    from modforge.presentation.manifest import Manifest

_log = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the modforge command."""
    parser = argparse.ArgumentParser(
        prog="modforge",
        description="Assemble modules, generated code and dependencies into a build plan",
    )
    parser.add_argument("manifest", type=Path, help="Module manifest (TOML)")
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write the build plan as JSON to this file",
    )
    parser.add_argument(
        "--testing",
        action="store_true",
        help="Configure a testing build (nothing is installed)",
    )
    parser.add_argument("--no-color", action="store_true", help="Plain text output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", type=Path, default=None, help="Also log to this file")
    return parser


def run(manifest: Manifest) -> BuildPlan:
    """Configure every manifest module and finalize the plan.

    Raises:
        ModForgeError: On the first fatal configuration error
    """
    config = manifest.config
    if manifest.generator_mode == "run":
        generator: SubprocessGenerator | DeferredGenerator = SubprocessGenerator(
            manifest.generator_command, cwd=config.project_root
        )
    else:
        generator = DeferredGenerator(manifest.generator_command)

    session = ConfigurationSession(
        config,
        generator=generator,
        inference=XmlTypeInference(),
        miner=XmlDependencyMiner(),
        locator=SourceTreeLocator((config.project_root,)),
    )
    for entry in manifest.modules:
        session.configure(
            entry.location,
            entry.inputs,
            entry.dependencies,
            target_kind=entry.target_kind,
            exclude_from_all=entry.exclude_from_all,
        )
    return session.finalize()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI. Returns process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, log_file=args.log_file, color=not args.no_color)
    reporter = ConsoleReporter(ConsoleConfig(color=not args.no_color))

    overrides: dict[str, object] = {}
    if args.testing:
        overrides["build_type"] = BuildType.TESTING

    try:
        manifest = load_manifest(args.manifest, **overrides)
        plan = run(manifest)
    except ModForgeError as e:
        _log.debug("Configuration failed", exc_info=True)
        sys.stderr.write(reporter.report_error(e))
        return 1

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(json.dumps(plan.to_dict(), indent=2), encoding="utf-8")
        _log.info("Build plan written to %s", args.output)

    sys.stdout.write(reporter.report(plan))
    return 0


if __name__ == "__main__":
    sys.exit(main())
