"""Install destination value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InstallRule:
    """Platform-scoped install destinations for a compiled unit.

    Attributes:
        runtime: Destination for executables and DLLs
        library: Destination for shared libraries
        archive: Destination for static archives
    """

    runtime: str
    library: str
    archive: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in ("runtime", "library", "archive"):
            if not getattr(self, name):
                raise ValueError(f"{name} destination must not be empty")

    @classmethod
    def for_platform(cls, platform: str) -> InstallRule:
        """Default destinations: bin/<p>, lib/<p>, lib/static/<p>."""
        if not platform:
            raise ValueError("platform must not be empty")
        return cls(
            runtime=f"bin/{platform}",
            library=f"lib/{platform}",
            archive=f"lib/static/{platform}",
        )
