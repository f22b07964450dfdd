"""
attrlocal: scoped attribute value override.

Temporarily replace a field of an object and get the previous value back,
in LIFO order, when the controlling scope ends:

    class Foo:
        bar = Localized(default="a", handles={"set_local_bar": "localize"})

    foo = Foo()
    with foo.set_local_bar("b"):
        assert foo.bar == "b"
    assert foo.bar == "a"
"""

import logging

from .guard import OverrideGuard
from .localize import MISSING, localize, localize_void
from .trait import Localized, localized_method, localizes
from .shared import (
    UNSET,
    AttributeAccessor,
    AttrAccessor,
    FunctionAccessor,
    ValueStack,
    stack_for,
    find_stack,
    LocalizeError,
    LocalizeContractError,
    EmptyStackViolation,
    ReleaseOrderViolation,
    HandleConfigurationError,
    VoidContextWarning,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "localize",
    "localize_void",
    "MISSING",
    "OverrideGuard",
    "Localized",
    "localizes",
    "localized_method",
    "UNSET",
    "AttributeAccessor",
    "AttrAccessor",
    "FunctionAccessor",
    "ValueStack",
    "stack_for",
    "find_stack",
    "LocalizeError",
    "LocalizeContractError",
    "EmptyStackViolation",
    "ReleaseOrderViolation",
    "HandleConfigurationError",
    "VoidContextWarning",
]
