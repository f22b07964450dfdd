"""
Value Stack

One LIFO of saved values per (attribute, instance). The stacks live on the
instance itself, in a dict under STACKS_ATTRIBUTE keyed by the accessor's
stack key, so they are created lazily and die with the instance.
"""

import logging
from typing import Any, Dict, List, Optional

from .accessor import AttributeAccessor
from .errors import EmptyStackViolation
from ..utils.config import STACKS_ATTRIBUTE

logger = logging.getLogger(__name__)


class ValueStack:
    """Saved values of one field on one instance, innermost last."""

    __slots__ = ("name", "_values")

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name
        self._values: List[Any] = []

    def push(self, value: Any) -> None:
        self._values.append(value)

    def pop(self) -> Any:
        if not self._values:
            raise EmptyStackViolation(self.name)
        return self._values.pop()

    def peek(self) -> Any:
        if not self._values:
            raise EmptyStackViolation(self.name)
        return self._values[-1]

    def depth(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ValueStack({self.name!r}, depth={len(self._values)})"


class _StackRegistry(dict):
    """name -> ValueStack, bound to the id of the instance that created it."""

    __slots__ = ("owner_id",)

    def __init__(self, owner_id: int) -> None:
        super().__init__()
        self.owner_id = owner_id


def _instance_stacks(instance: Any, create: bool) -> Optional[Dict[str, ValueStack]]:
    try:
        namespace = vars(instance)
    except TypeError:
        raise TypeError(
            f"cannot localize attributes of {type(instance).__name__!r} objects: "
            "instance has no __dict__ to hold value stacks"
        ) from None
    stacks = namespace.get(STACKS_ATTRIBUTE)
    # A copied or unpickled instance carries the registry of its source
    if stacks is not None and getattr(stacks, "owner_id", None) != id(instance):
        stacks = None
    if stacks is None and create:
        stacks = _StackRegistry(id(instance))
        # object.__setattr__ bypasses a frozen or validating __setattr__
        object.__setattr__(instance, STACKS_ATTRIBUTE, stacks)
    return stacks


def stack_for(instance: Any, accessor: AttributeAccessor) -> ValueStack:
    """Stack owned by instance for this accessor, created on first use."""
    stacks = _instance_stacks(instance, create=True)
    key = accessor.stack_key
    stack = stacks.get(key)
    if stack is None:
        stack = ValueStack(accessor.name)
        stacks[key] = stack
        logger.debug(f"created value stack for '{key}' on {type(instance).__name__}")
    return stack


def find_stack(instance: Any, accessor: AttributeAccessor) -> Optional[ValueStack]:
    """Stack for this accessor if one was ever created, else None."""
    stacks = _instance_stacks(instance, create=False)
    if stacks is None:
        return None
    return stacks.get(accessor.stack_key)
