"""Base exceptions for modforge domain."""


class ModForgeError(Exception):
    """Root exception for all modforge errors.

    All domain exceptions inherit from this.
    Every error is fatal to the configuration pass that raised it.
    """
