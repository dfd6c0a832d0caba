"""modforge - module assembly and code-generation orchestration for component builds."""

__version__ = "0.1.0"

from modforge.application.session import ConfigurationSession
from modforge.domain.model.configuration import BuildConfig

__all__ = ["BuildConfig", "ConfigurationSession", "__version__"]
