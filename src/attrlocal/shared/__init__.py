"""
Shared building blocks: accessors, value stacks and the error taxonomy.
"""

from .accessor import UNSET, AttributeAccessor, AttrAccessor, FunctionAccessor, as_accessor
from .errors import (
    LocalizeError,
    LocalizeContractError,
    EmptyStackViolation,
    ReleaseOrderViolation,
    HandleConfigurationError,
    VoidContextWarning,
)
from .stack import ValueStack, stack_for, find_stack
