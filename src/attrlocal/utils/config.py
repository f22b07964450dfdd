"""
Configuration constants to replace magic strings throughout attrlocal
"""

import os

# Instance storage (key in instance __dict__ holding name -> ValueStack)
STACKS_ATTRIBUTE = "__attrlocal_stacks__"

# Handle targets accepted by Localized(handles=...) and localizes(...)
HANDLE_LOCALIZE = "localize"
HANDLE_LOCALIZE_VOID = "localize_void"
HANDLE_TARGETS = (HANDLE_LOCALIZE, HANDLE_LOCALIZE_VOID)

# Void-context advisory
VOID_CONTEXT_MESSAGE = "localize called in void context is a no-op"
VOID_WARNING_ENV = "ATTRLOCAL_VOID_WARNING"
FALSE_ENV_VALUES = ("0", "false", "no", "never")

# Warning stack level so the advisory points at the caller of localize_void
VOID_WARNING_STACKLEVEL = 2


def void_warning_enabled() -> bool:
    """False when ATTRLOCAL_VOID_WARNING is set to a false-like value."""
    explicit = os.environ.get(VOID_WARNING_ENV, "").lower()
    return explicit not in FALSE_ENV_VALUES
