"""Configuration exceptions."""

from __future__ import annotations

from modforge.domain.exceptions.base import ModForgeError


class ConfigurationError(ModForgeError):
    """Invalid build configuration or module manifest.

    Attributes:
        reason: What is wrong (must not be empty)
    """

    def __init__(self, reason: str) -> None:
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        super().__init__(f"Invalid configuration: {reason}")


class ModuleFinalizedError(ModForgeError, RuntimeError):
    """Module was modified after it was handed to the build tool.

    Inherits RuntimeError for semantic correctness (invalid state).

    Attributes:
        module: Name of the finalized module
    """

    def __init__(self, module: str) -> None:
        """Initialize with module name."""
        self.module = module
        super().__init__(f"Module '{module}' is finalized and cannot be modified")
