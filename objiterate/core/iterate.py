"""Entry points: visit, filter and transform an iterable object.

These are the counterparts of a for-each loop, ``filter`` and ``map`` for
objects that produce one element at a time through their ``more``/``next``
methods instead of holding a materialized sequence.

Example:
    >>> class Numbers:
    ...     data = [1, 2, 3]
    ...     def __init__(self):
    ...         self.index = 0
    ...     def __more__(self):
    ...         return self.index < len(self.data)
    ...     def __next__(self):
    ...         self.index += 1
    ...         return self.data[self.index - 1]
    >>> filter(lambda x: x % 2 == 0, Numbers())
    [2]
    >>> transform(lambda x: [x, x * 10], Numbers())
    [1, 10, 2, 20, 3, 30]
"""

from typing import Any, Callable, List, Optional

from objiterate.core.driver.loop import drive
from objiterate.core.driver.modes import FilterMode, TransformMode, VisitMode
from objiterate.core.schema.names import MethodNames


def iterate(
    operation: Callable[[Any], Any], obj: Any, names: Optional[MethodNames] = None
) -> None:
    """Apply ``operation`` to every element of ``obj`` for its side effects.

    Args:
        operation: Called with each element in turn
        obj: Object implementing the configured ``more``/``next`` methods
        names: Role bindings for this call (default: the registry's)

    Raises:
        CapabilityError: If ``obj`` lacks a required method
    """
    drive(operation, obj, VisitMode(), names=names)


def filter(
    operation: Callable[[Any], Any], obj: Any, names: Optional[MethodNames] = None
) -> List[Any]:
    """Return the elements of ``obj`` for which ``operation`` is truthy.

    Args:
        operation: Predicate called with each element
        obj: Object implementing the configured ``more``/``next`` methods
        names: Role bindings for this call (default: the registry's)

    Returns:
        Matching elements in iteration order

    Raises:
        CapabilityError: If ``obj`` lacks a required method
    """
    return drive(operation, obj, FilterMode(), names=names)


def transform(
    operation: Callable[[Any], Any], obj: Any, names: Optional[MethodNames] = None
) -> List[Any]:
    """Return the results of ``operation`` over ``obj``, flattened one level.

    A list or tuple returned for an element contributes its members, so an
    operation can map one element to zero, one or several outputs.

    Args:
        operation: Callable applied to each element
        obj: Object implementing the configured ``more``/``next`` methods
        names: Role bindings for this call (default: the registry's)

    Returns:
        Concatenated results in iteration order

    Raises:
        CapabilityError: If ``obj`` lacks a required method
    """
    return drive(operation, obj, TransformMode(), names=names)


igrep = filter
imap = transform
