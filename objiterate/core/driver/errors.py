"""Exceptions raised by the iteration driver and the naming registry."""

from typing import Any, Optional


class CapabilityError(TypeError):
    """Raised when an object lacks a required iteration method.

    The check runs once, before any method of the object is called, so a
    malformed object fails fast instead of partway through a loop. Only the
    required roles (``more`` and ``next``) can trigger this error; missing
    lifecycle hooks are skipped silently.

    Attributes:
        message: Description of the failure
        role: The missing role ("more" or "next")
        method_name: The method name configured for that role
        obj: The object that failed resolution (optional)
    """

    def __init__(
        self, message: str, role: str, method_name: str, obj: Optional[Any] = None
    ) -> None:
        """Initialize CapabilityError exception.

        Args:
            message: Error message describing the failure
            role: The missing role
            method_name: The configured method name for the role
            obj: The object that failed resolution (optional)
        """
        super().__init__(message)
        self.role = role
        self.method_name = method_name
        self.obj = obj


class ConfigurationError(ValueError):
    """Raised when a method-name binding is invalid.

    Covers empty or non-string names for the required roles, non-string
    names for the optional hooks, and unknown role names.

    Attributes:
        message: Description of the failure
        role: The role being configured (optional)
        value: The rejected value (optional)
    """

    def __init__(
        self, message: str, role: Optional[str] = None, value: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.role = role
        self.value = value
