"""Dependency graph exceptions."""

from __future__ import annotations

from modforge.domain.exceptions.base import ModForgeError


class UnresolvedDependency(ModForgeError):
    """Dependency identifier has no known target module.

    Attributes:
        module: Name of the module declaring the dependency
        identifier: Identifier that could not be resolved
        reason: Why resolution failed
    """

    def __init__(self, module: str, identifier: str, reason: str = "no known module") -> None:
        # FAIL-FIRST validation
        if not module:
            raise ValueError("module must not be empty")
        if not identifier:
            raise ValueError("identifier must not be empty")

        self.module = module
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Module '{module}' depends on '{identifier}': {reason}")


class DependencyCycleError(ModForgeError):
    """Module dependency graph contains a cycle.

    Attributes:
        cycle: Module names along the cycle, first node repeated at the end
    """

    def __init__(self, cycle: tuple[str, ...]) -> None:
        if not cycle:
            raise ValueError("cycle must not be empty")

        self.cycle = cycle
        super().__init__(f"Circular module dependency: {' -> '.join(cycle)}")
