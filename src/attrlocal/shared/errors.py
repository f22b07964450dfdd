"""
Error Taxonomy

Everything attrlocal raises derives from LocalizeError. Contract violations
(broken LIFO discipline) are raised immediately and never recovered from;
the void-context advisory is a warning, not an error.
"""

from typing import Optional


# ============================================================================
# Exception Classes
# ============================================================================

class LocalizeError(Exception):
    """Base exception for all attrlocal errors"""
    def __init__(self, message: str, name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.name = name

    def __str__(self):
        if self.name:
            return f"{self.message} (attribute '{self.name}')"
        return self.message


class LocalizeContractError(LocalizeError):
    """
    The LIFO ordering contract between overrides and releases was broken.

    Raised for programming errors only: a guard released out of nested order,
    or a value stack mutated by something other than localize / release.
    """


class EmptyStackViolation(LocalizeContractError):
    """A pop was attempted on an exhausted value stack."""
    def __init__(self, name: Optional[str] = None):
        super().__init__("pop from empty value stack", name)


class ReleaseOrderViolation(LocalizeContractError):
    """
    A guard was released while a more deeply nested guard on the same
    attribute and instance was still active.
    """
    def __init__(self, name: Optional[str], expected_depth: int, actual_depth: int):
        super().__init__(
            f"guard released out of order: owns depth {expected_depth}, "
            f"stack depth is {actual_depth}",
            name,
        )
        self.expected_depth = expected_depth
        self.actual_depth = actual_depth


class HandleConfigurationError(LocalizeError, TypeError):
    """Invalid handles / alias configuration, raised at class definition."""


# ============================================================================
# Warning Classes
# ============================================================================

class VoidContextWarning(UserWarning):
    """localize_void was used: the override's duration collapses to zero."""
