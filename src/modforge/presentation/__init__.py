"""Presentation layer: command line and console output."""

from modforge.presentation.cli import main
from modforge.presentation.console import ConsoleConfig, ConsoleReporter
from modforge.presentation.manifest import Manifest, ModuleEntry, load_manifest

__all__ = [
    "main",
    "ConsoleConfig",
    "ConsoleReporter",
    "Manifest",
    "ModuleEntry",
    "load_manifest",
]
