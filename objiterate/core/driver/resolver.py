"""Capability resolution for iterable objects.

Decides, before any method is called, whether an object supports the
configured ``more`` and ``next`` roles and which optional hooks it has.
Lookup is static: attributes that only exist through ``__getattr__`` or a
custom ``__getattribute__`` are treated as unsupported, since a catch-all
cannot be assumed to implement the expected semantics.
"""

import inspect
from dataclasses import dataclass
from typing import Any, Optional

from objiterate.core.driver.errors import CapabilityError
from objiterate.core.registry import get_names
from objiterate.core.schema.names import REQUIRED_ROLES, MethodNames

_MISSING = object()


@dataclass(frozen=True)
class Capabilities:
    """Resolved iteration methods of one object.

    Attributes:
        more: Method name for the continue check
        next: Method name for producing elements
        init: Start hook name, or None if the object has no such hook
        final: End hook name, or None if the object has no such hook
    """

    more: str
    next: str
    init: Optional[str] = None
    final: Optional[str] = None

    @property
    def has_init(self) -> bool:
        return self.init is not None

    @property
    def has_final(self) -> bool:
        return self.final is not None


def _defined_on_builtin(obj: Any, name: str) -> bool:
    """True if ``name`` resolves to an attribute of a builtin type such as list."""
    if isinstance(obj, type):
        mro = obj.__mro__
    else:
        try:
            instance_dict = object.__getattribute__(obj, "__dict__")
        except AttributeError:
            instance_dict = {}
        if name in instance_dict:
            return False
        mro = type(obj).__mro__
    for klass in mro:
        if name in vars(klass):
            return klass.__module__ == "builtins"
    return False


def has_method(obj: Any, name: Optional[str]) -> bool:
    """Check whether ``obj`` directly provides a callable named ``name``.

    Class methods, static methods and callable instance attributes count.
    Attributes inherited from a builtin type (``object.__init__``,
    ``list.__init__`` and friends) do not, nor does anything only reachable
    via ``__getattr__``.
    """
    if not name:
        return False

    found = inspect.getattr_static(obj, name, _MISSING)
    if found is _MISSING:
        return False
    if _defined_on_builtin(obj, name):
        return False
    return callable(found) or isinstance(found, (staticmethod, classmethod))


def supports(obj: Any, role: str, names: Optional[MethodNames] = None) -> bool:
    """Check whether ``obj`` implements the method bound to ``role``.

    Args:
        obj: Object to inspect
        role: One of "next", "more", "init", "final"
        names: Bindings to use (defaults to the current registry bindings)
    """
    if names is None:
        names = get_names()
    return has_method(obj, names.for_role(role))


def resolve(obj: Any, names: MethodNames) -> Capabilities:
    """Resolve the iteration methods of ``obj`` under ``names``.

    Args:
        obj: Object to be iterated
        names: Role bindings snapshot for this call

    Returns:
        Capabilities with the required method names and the present hooks

    Raises:
        CapabilityError: If the ``more`` or ``next`` method is missing.
            ``more`` is checked first.
    """
    for role in REQUIRED_ROLES:
        method_name = names.for_role(role)
        if not has_method(obj, method_name):
            raise CapabilityError(
                f"{type(obj).__name__} object does not support the '{role}' role: "
                f"no method named '{method_name}'",
                role=role,
                method_name=method_name,
                obj=obj,
            )

    return Capabilities(
        more=names.more,
        next=names.next,
        init=names.init if has_method(obj, names.init) else None,
        final=names.final if has_method(obj, names.final) else None,
    )
