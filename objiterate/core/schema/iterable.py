"""Iterable object protocol under the default method names."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SupportsIterate(Protocol):
    """Object that produces elements one at a time.

    The object represents a collection that is never materialized: it knows
    how to produce the next element and when to stop. Only ``__more__`` and
    ``__next__`` are required; the lifecycle hooks are optional.

    This protocol documents the default contract only. The driver resolves
    methods by the names currently configured in the registry, so an object
    built for renamed roles will not match this protocol and still be
    iterable.

    A class defining ``__init__`` gets it called with no arguments as the
    start hook, so configuration belongs in attributes and ``__init__`` only
    rewinds.

    Example:
        class Countdown:
            start = 3

            def __init__(self):
                self.n = self.start

            def __more__(self):
                return self.n > 0

            def __next__(self):
                self.n -= 1
                return self.n + 1
    """

    def __more__(self) -> Any:
        """Return a value whose truthiness says whether another element exists."""
        ...

    def __next__(self) -> Any:
        """Return the next element.

        Only called right after ``__more__`` returned a truthy value.
        """
        ...
