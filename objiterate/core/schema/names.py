"""Method-name bindings for the four iteration roles.

A MethodNames value is one snapshot of the naming configuration: which
method the driver calls to ask for more elements, which one produces the
next element, and which optional hooks run before and after the loop.

Roles
-----

- more: continue check, required. Default ``"__more__"``.
- next: produce the next element, required. Default ``"__next__"``.
- init: start hook, optional. Default ``"__init__"``.
- final: end hook, optional. Default ``"__final__"``.
"""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Optional

from objiterate.core.driver.errors import ConfigurationError

REQUIRED_ROLES = ("more", "next")
OPTIONAL_ROLES = ("init", "final")
ROLES = REQUIRED_ROLES + OPTIONAL_ROLES


@dataclass(frozen=True)
class MethodNames:
    """Snapshot of the role-to-method-name bindings.

    Attributes:
        next: Method that returns the next element
        more: Method whose truthiness decides whether iteration continues
        init: Hook called once before the first ``more`` check, or None
        final: Hook called once after ``more`` first returns false, or None

    Example:
        >>> names = MethodNames(more="has_more", next="fetch")
        >>> names.init
        '__init__'
    """

    next: str = "__next__"
    more: str = "__more__"
    init: Optional[str] = "__init__"
    final: Optional[str] = "__final__"

    def __post_init__(self) -> None:
        for role in REQUIRED_ROLES:
            value = getattr(self, role)
            if not isinstance(value, str) or not value:
                raise ConfigurationError(
                    f"Method name for required role '{role}' must be a non-empty string, "
                    f"got {value!r}",
                    role=role,
                    value=value,
                )
        for role in OPTIONAL_ROLES:
            value = getattr(self, role)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(
                    f"Method name for role '{role}' must be a string or None, got {value!r}",
                    role=role,
                    value=value,
                )

    def with_roles(self, **roles: Optional[str]) -> "MethodNames":
        """Return a copy with some bindings replaced.

        Raises:
            ConfigurationError: If a role is unknown or a value is invalid
        """
        unknown = sorted(set(roles) - set(ROLES))
        if unknown:
            raise ConfigurationError(
                f"Unknown iteration role(s): {', '.join(unknown)}", role=unknown[0]
            )
        return replace(self, **roles)

    def for_role(self, role: str) -> Optional[str]:
        """Method name bound to ``role``."""
        if role not in ROLES:
            raise ConfigurationError(f"Unknown iteration role: {role}", role=role)
        return getattr(self, role)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_NAMES = MethodNames()
