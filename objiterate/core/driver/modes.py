"""Mode adapters deciding what the driver accumulates.

Each adapter receives every (element, result) pair the driver produces and
builds the value returned to the caller:

- VisitMode: nothing, for side-effect-only visitation
- FilterMode: the elements whose operation result was truthy
- TransformMode: the operation results, flattened one level
"""

from collections.abc import Sequence
from typing import Any, List, Optional, Protocol

# Sequences appended whole by TransformMode instead of being flattened
SCALAR_SEQUENCES = (str, bytes, bytearray)


class Mode(Protocol):
    """Accumulation policy used by the driver."""

    name: str

    def accept(self, element: Any, result: Any) -> None:
        """Record the operation's result for one element."""
        ...

    def result(self) -> Optional[List[Any]]:
        """Value handed back to the caller once the loop finishes."""
        ...


class VisitMode:
    """Apply the operation for its side effects only."""

    name = "iterate"

    def accept(self, element: Any, result: Any) -> None:
        pass

    def result(self) -> None:
        return None


class FilterMode:
    """Keep the elements for which the operation returned a truthy value.

    The element itself is kept, not the operation's result, and iteration
    order is preserved.
    """

    name = "filter"

    def __init__(self):
        self.accumulated: List[Any] = []

    def accept(self, element: Any, result: Any) -> None:
        if result:
            self.accumulated.append(element)

    def result(self) -> List[Any]:
        return self.accumulated


class TransformMode:
    """Collect the operation's results, flattening sequences one level.

    A result that is a sequence (list, tuple, range, ...) contributes its
    members; strings, bytes and every non-sequence value, None included,
    are appended as a single item.

    Example:
        >>> mode = TransformMode()
        >>> mode.accept(1, [1, 10])
        >>> mode.accept(2, "ab")
        >>> mode.result()
        [1, 10, 'ab']
    """

    name = "transform"

    def __init__(self):
        self.accumulated: List[Any] = []

    def accept(self, element: Any, result: Any) -> None:
        if isinstance(result, Sequence) and not isinstance(result, SCALAR_SEQUENCES):
            self.accumulated.extend(result)
        else:
            self.accumulated.append(result)

    def result(self) -> List[Any]:
        return self.accumulated
