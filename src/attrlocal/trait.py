"""
Composition

Two ways for a class author to give an attribute a localize handle:

    class Foo:
        bar = Localized(default=1, handles={"set_local_bar": "localize"})

    @localizes(set_local_bar="bar")
    class Foo:
        def __init__(self):
            self.bar = 1

Either way foo.set_local_bar(2) returns an OverrideGuard for foo.bar.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from .guard import OverrideGuard
from .localize import MISSING, localize, localize_void
from .shared.accessor import AttrAccessor, AttributeAccessor, as_accessor
from .shared.errors import HandleConfigurationError
from .utils.config import (
    HANDLE_LOCALIZE,
    HANDLE_LOCALIZE_VOID,
    HANDLE_TARGETS,
    VOID_WARNING_STACKLEVEL,
)

logger = logging.getLogger(__name__)


def localized_method(accessor: AttributeAccessor, void: bool = False) -> Callable[..., Any]:
    """Build the method bound as a localize handle for accessor."""
    if void:
        def method(self, value=MISSING):
            # one extra frame: the warning should point at our caller
            localize_void(self, accessor, value, stacklevel=VOID_WARNING_STACKLEVEL + 1)
        method.__doc__ = (
            f"Localize '{accessor.name}' and release at once (warns: no-op duration)."
        )
    else:
        def method(self, value=MISSING) -> OverrideGuard:
            return localize(self, accessor, value)
        method.__doc__ = (
            f"Temporarily override '{accessor.name}'; returns the guard that restores it."
        )
    return method


def _check_target(alias: str, target: str) -> None:
    if target not in HANDLE_TARGETS:
        raise HandleConfigurationError(
            f"handle '{alias}' delegates to unknown method '{target}' "
            f"(expected one of {', '.join(HANDLE_TARGETS)})"
        )


def _install_handle(owner: type, alias: str, accessor: AttributeAccessor, target: str) -> None:
    if alias in vars(owner):
        raise HandleConfigurationError(
            f"handle '{alias}' clashes with an existing attribute of {owner.__name__}",
            accessor.name,
        )
    method = localized_method(accessor, void=(target == HANDLE_LOCALIZE_VOID))
    method.__name__ = alias
    method.__qualname__ = f"{owner.__qualname__}.{alias}"
    method.__module__ = owner.__module__
    setattr(owner, alias, method)
    logger.debug(f"bound {owner.__name__}.{alias} -> {target}('{accessor.name}')")


# -----------------------------------------------------------------------------
# Localized descriptor
# -----------------------------------------------------------------------------


class Localized:
    """
    Stored attribute that can hand out localize handles.

    The value lives in the instance __dict__ under the attribute's own name;
    being a data descriptor, Localized still intercepts every access.
    handles maps alias -> "localize" | "localize_void"; the aliases become
    methods of the owning class when the class is created.
    """

    def __init__(
        self,
        default: Any = MISSING,
        *,
        default_factory: Optional[Callable[[], Any]] = None,
        handles: Optional[Mapping[str, str]] = None,
        doc: Optional[str] = None,
    ) -> None:
        if default is not MISSING and default_factory is not None:
            raise ValueError("cannot specify both default and default_factory")
        self.default = default
        self.default_factory = default_factory
        self.handles: Dict[str, str] = dict(handles or {})
        for alias, target in self.handles.items():
            _check_target(alias, target)
        self.name: Optional[str] = None
        self.__doc__ = doc

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        accessor = AttrAccessor(name)
        for alias, target in self.handles.items():
            _install_handle(owner, alias, accessor, target)

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        namespace = vars(instance)
        try:
            return namespace[self.name]
        except KeyError:
            pass
        if self.default_factory is not None:
            value = self.default_factory()
            namespace[self.name] = value
            return value
        if self.default is MISSING:
            raise AttributeError(
                f"'{type(instance).__name__}' object attribute '{self.name}' has no value"
            )
        return self.default

    def __set__(self, instance: Any, value: Any) -> None:
        vars(instance)[self.name] = value

    def __delete__(self, instance: Any) -> None:
        try:
            del vars(instance)[self.name]
        except KeyError:
            raise AttributeError(self.name) from None

    def __repr__(self) -> str:
        return f"Localized({self.name!r}, handles={self.handles!r})"


# -----------------------------------------------------------------------------
# Class decorator
# -----------------------------------------------------------------------------


AliasSpec = Union[str, AttributeAccessor, Tuple[Union[str, AttributeAccessor], str]]


def localizes(**aliases: AliasSpec) -> Callable[[type], type]:
    """
    Class decorator adding localize handles for existing attributes.

        @localizes(set_local_bar="bar", peek_bar=("bar", "localize_void"))

    Each value is an attribute name or accessor, optionally paired with the
    handle target ("localize" when omitted).
    """
    resolved = []
    for alias, spec in aliases.items():
        if isinstance(spec, tuple):
            if len(spec) != 2:
                raise HandleConfigurationError(
                    f"handle '{alias}' must be (attribute, target), got {spec!r}"
                )
            attribute, target = spec
        else:
            attribute, target = spec, HANDLE_LOCALIZE
        _check_target(alias, target)
        try:
            accessor = as_accessor(attribute)
        except TypeError as exc:
            raise HandleConfigurationError(f"handle '{alias}': {exc}") from exc
        resolved.append((alias, accessor, target))

    def decorator(cls: type) -> type:
        for alias, accessor, target in resolved:
            _install_handle(cls, alias, accessor, target)
        return cls

    return decorator
