"""Iteration driver: capability resolution, the shared loop, mode adapters.

The errors module is imported first; the schema package depends on it.
"""

from objiterate.core.driver.errors import CapabilityError, ConfigurationError
from objiterate.core.driver.resolver import Capabilities, has_method, resolve, supports
from objiterate.core.driver.modes import FilterMode, Mode, TransformMode, VisitMode
from objiterate.core.driver.loop import drive

__all__ = [
    "drive",
    "resolve",
    "supports",
    "has_method",
    "Capabilities",
    "Mode",
    "VisitMode",
    "FilterMode",
    "TransformMode",
    "CapabilityError",
    "ConfigurationError",
]
