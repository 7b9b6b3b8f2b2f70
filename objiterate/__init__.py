"""
objiterate: iteration control structures for on-demand collections.

Drives objects that produce one element at a time (a ``__more__`` check and a
``__next__`` producer, with optional ``__init__``/``__final__`` hooks) and
offers three ways to consume them: visit, filter and transform.
"""

__version__ = "1.0.0"

from objiterate.core.driver.errors import CapabilityError, ConfigurationError
from objiterate.core.iterate import filter, igrep, imap, iterate, transform
from objiterate.core.registry import (
    configure_from_file,
    get_names,
    override_names,
    reset_names,
    set_names,
)
from objiterate.core.schema.names import DEFAULT_NAMES, MethodNames

__all__ = [
    "__version__",
    "iterate",
    "filter",
    "transform",
    "igrep",
    "imap",
    "get_names",
    "set_names",
    "reset_names",
    "override_names",
    "configure_from_file",
    "MethodNames",
    "DEFAULT_NAMES",
    "CapabilityError",
    "ConfigurationError",
]
