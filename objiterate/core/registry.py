"""Process-wide registry of iteration method names.

The registry holds the bindings every entry point uses unless a call passes
its own ``names=`` snapshot. It starts at the defaults and may be changed by
the caller at any time. Each driver call reads it once, at entry, so a change
is seen by later calls but never by a loop already running.

The registry is not synchronized. Code that needs a temporary renaming
should use ``override_names``, which restores the previous bindings on every
exit path.

Example:
    >>> from objiterate.core.registry import override_names
    >>> with override_names(more="has_more", next="fetch"):
    ...     iterate(print, stream)
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from objiterate.core.config import load_method_names
from objiterate.core.schema.names import DEFAULT_NAMES, MethodNames

logger = logging.getLogger(__name__)

_current: MethodNames = DEFAULT_NAMES


def get_names() -> MethodNames:
    """Return the current role bindings."""
    return _current


def set_names(names: Optional[MethodNames] = None, **roles: Optional[str]) -> MethodNames:
    """Replace some or all of the role bindings.

    Either pass a complete ``MethodNames`` snapshot, or keyword arguments
    for the roles to change (``next``, ``more``, ``init``, ``final``). Both
    may be combined: keywords are applied on top of ``names``. The registry
    is left unchanged if any value is rejected.

    Args:
        names: Full snapshot to install (optional)
        **roles: Individual bindings to change

    Returns:
        The bindings in effect before the change

    Raises:
        ConfigurationError: If a role is unknown or a required name is empty
    """
    global _current

    base = names if names is not None else _current
    updated = base.with_roles(**roles) if roles else base

    previous = _current
    _current = updated
    if updated != previous:
        logger.info(f"Iteration method names changed: {updated.to_dict()}")
    return previous


def reset_names() -> MethodNames:
    """Restore the default bindings and return the previous ones."""
    return set_names(DEFAULT_NAMES)


@contextmanager
def override_names(
    names: Optional[MethodNames] = None, **roles: Optional[str]
) -> Iterator[MethodNames]:
    """Temporarily change the role bindings.

    The prior bindings are saved before the change and restored when the
    block exits, whether normally or through an exception.

    Yields:
        The bindings in effect inside the block
    """
    previous = set_names(names, **roles)
    try:
        yield _current
    finally:
        set_names(previous)


def configure_from_file(config_path: str = "config.json") -> MethodNames:
    """Apply role bindings from a config file and the environment.

    Roles not mentioned in the file or environment keep their current
    binding. See ``objiterate.core.config`` for the file format.

    Returns:
        The bindings now in effect
    """
    roles = load_method_names(config_path)
    if roles:
        logger.info(f"Loaded iteration method names from {config_path}: {roles}")
        set_names(**roles)
    else:
        logger.debug(f"No iteration method names configured in {config_path}")
    return _current
