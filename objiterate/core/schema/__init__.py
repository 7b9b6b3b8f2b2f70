"""
Schema definitions for iteration roles and iterable objects.
"""

from objiterate.core.schema.iterable import SupportsIterate
from objiterate.core.schema.names import (
    DEFAULT_NAMES,
    OPTIONAL_ROLES,
    REQUIRED_ROLES,
    ROLES,
    MethodNames,
)

__all__ = [
    "DEFAULT_NAMES",
    "MethodNames",
    "OPTIONAL_ROLES",
    "REQUIRED_ROLES",
    "ROLES",
    "SupportsIterate",
]
