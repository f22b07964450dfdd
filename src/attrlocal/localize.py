"""
Override Operation

localize() saves a field's current value on the instance's value stack,
installs a replacement and hands back the guard that undoes it:

    with localize(config, "verbose", True):
        run()            # config.verbose is True here
    # previous value restored, even if run() raised

Without a replacement the field gets a shallow copy of its current value,
so in-place mutation inside the scope is undone at release. Nested
sub-structure is shared with the saved value, not copied.
"""

import copy
import logging
import warnings
from typing import Any, Union

from .guard import OverrideGuard
from .shared.accessor import UNSET, AttributeAccessor, as_accessor
from .shared.errors import VoidContextWarning
from .shared.stack import stack_for
from .utils.config import (
    VOID_CONTEXT_MESSAGE,
    VOID_WARNING_STACKLEVEL,
    void_warning_enabled,
)

logger = logging.getLogger(__name__)


class _Missing:
    def __repr__(self) -> str:
        return "<omitted>"


# Distinguishes "no replacement given" from an explicit None
MISSING: Any = _Missing()


def localize(
    instance: Any,
    attribute: Union[AttributeAccessor, str],
    value: Any = MISSING,
) -> OverrideGuard:
    """
    Temporarily override one field of instance.

    Args:
        instance: object owning the field
        attribute: accessor for the field, or a plain attribute name
        value: replacement; omitted means a shallow copy of the current value

    Returns:
        Active OverrideGuard. Release it (or leave its with-block) to restore.
    """
    accessor = as_accessor(attribute)
    old = accessor.read(instance)
    if value is MISSING:
        installed = old if old is UNSET else copy.copy(old)
    else:
        installed = value

    stack = stack_for(instance, accessor)
    stack.push(old)

    try:
        accessor.write(instance, installed)
    except BaseException:
        stack.pop()
        raise

    logger.debug(
        f"localized '{accessor.name}': {old!r} -> {installed!r} (depth {stack.depth()})"
    )
    return OverrideGuard(accessor, instance, stack)


def localize_void(
    instance: Any,
    attribute: Union[AttributeAccessor, str],
    value: Any = MISSING,
    *,
    stacklevel: int = VOID_WARNING_STACKLEVEL,
) -> None:
    """
    localize() whose guard is released straight away.

    The override and the restore both run, so setter side effects happen,
    but the field ends with the value it started with. Emits one
    VoidContextWarning since the call is almost certainly a mistake.
    """
    guard = localize(instance, attribute, value)
    guard.release()
    if void_warning_enabled():
        warnings.warn(
            VOID_CONTEXT_MESSAGE,
            VoidContextWarning,
            stacklevel=stacklevel,
        )
