"""Iteration driver shared by all consumption modes.

The driver runs one loop against an object that produces elements on
demand:

1. Resolve capabilities (fails before any call on the object)
2. Call the start hook, if the object has one
3. Ask ``more()``; stop when it is falsy
4. Call ``next()`` exactly once and pass the element to the operation
5. Hand (element, result) to the mode adapter and go back to 3
6. Call the end hook, if the object has one, and return the mode's result

Termination is decided by the object alone. Errors raised by the object or
by the operation propagate unchanged; the end hook is not called after one.
"""

import logging
from typing import Any, Callable, List, Optional

from objiterate.core.driver.modes import Mode
from objiterate.core.driver.resolver import resolve
from objiterate.core.registry import get_names
from objiterate.core.schema.names import MethodNames

logger = logging.getLogger(__name__)


def drive(
    operation: Callable[[Any], Any],
    obj: Any,
    mode: Mode,
    names: Optional[MethodNames] = None,
) -> Optional[List[Any]]:
    """Run the iteration loop over ``obj``.

    Args:
        operation: Single-argument callable applied to each element
        obj: Object implementing the configured ``more``/``next`` methods
        mode: Adapter accumulating the operation's results
        names: Role bindings for this call (defaults to a snapshot of the
            registry taken now; later registry changes do not affect this loop)

    Returns:
        The mode's result: None for visit, a list for filter and transform

    Raises:
        TypeError: If ``operation`` is not callable
        CapabilityError: If ``obj`` lacks the ``more`` or ``next`` method
    """
    if not callable(operation):
        raise TypeError(f"operation must be callable, got {type(operation).__name__}")

    if names is None:
        names = get_names()

    capabilities = resolve(obj, names)
    logger.debug(
        f"{mode.name}: driving {type(obj).__name__} with more={capabilities.more} "
        f"next={capabilities.next} init={capabilities.init} final={capabilities.final}"
    )

    if capabilities.has_init:
        getattr(obj, capabilities.init)()

    count = 0
    while getattr(obj, capabilities.more)():
        element = getattr(obj, capabilities.next)()
        mode.accept(element, operation(element))
        count += 1

    if capabilities.has_final:
        getattr(obj, capabilities.final)()

    logger.debug(f"{mode.name}: finished after {count} element(s)")
    return mode.result()
