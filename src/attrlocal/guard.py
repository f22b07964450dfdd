"""
Override Guard

Restoration token returned by localize(). Releasing it pops the value saved
underneath it and writes that value back, exactly once. The guard is a
context manager; leaving the with-block releases it on every exit path.
"""

import logging
from typing import Any, Optional

from .shared.accessor import AttributeAccessor
from .shared.errors import ReleaseOrderViolation
from .shared.stack import ValueStack

logger = logging.getLogger(__name__)


class OverrideGuard:
    """
    One in-flight override of one field on one instance.

    States: active -> released. Guards may be passed around but not copied;
    a copy would restore twice.
    """

    __slots__ = ("_accessor", "_instance", "_stack", "_depth", "_released")

    def __init__(
        self,
        accessor: AttributeAccessor,
        instance: Any,
        stack: ValueStack,
    ) -> None:
        self._accessor = accessor
        self._instance = instance
        self._stack = stack
        # Depth right after our push; only the innermost guard may pop
        self._depth = stack.depth()
        self._released = False

    @property
    def name(self) -> str:
        return self._accessor.name

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Restore the saved value. A second call does nothing."""
        if self._released:
            return
        actual = self._stack.depth()
        if actual != self._depth:
            logger.warning(
                f"release of '{self.name}' at depth {self._depth} "
                f"while stack depth is {actual}"
            )
            raise ReleaseOrderViolation(self.name, self._depth, actual)
        # Stack and flag change only after a successful write
        previous = self._stack.peek()
        self._accessor.write(self._instance, previous)
        self._stack.pop()
        self._released = True
        logger.debug(f"restored '{self.name}' to {previous!r} (depth {actual - 1})")

    def __enter__(self) -> "OverrideGuard":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> Optional[bool]:
        self.release()
        return None

    def __copy__(self):
        raise TypeError("OverrideGuard cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("OverrideGuard cannot be copied")

    def __reduce__(self):
        raise TypeError("OverrideGuard cannot be pickled")

    def __repr__(self) -> str:
        state = "released" if self._released else "active"
        return f"<OverrideGuard '{self.name}' depth={self._depth} {state}>"
