"""
Attribute Accessors

An accessor names one mutable field and knows how to get, set, clear and
test it on a given instance. The override machinery only talks to fields
through this interface, so any object exposing get/set can be localized.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


class _Unset:
    """Marker for a field that holds no value at all."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Unset":
        return self

    def __deepcopy__(self, memo: Any) -> "_Unset":
        return self

    def __reduce__(self):
        return (_Unset, ())


UNSET = _Unset()


class AttributeAccessor(ABC):
    """
    get/set/clear/has_value on one named field of an instance.

    Contract: get(instance) immediately after set(instance, v) returns v.
    """

    name: str

    @property
    def stack_key(self) -> str:
        """Key under which the instance keeps this field's value stack."""
        return self.name

    @abstractmethod
    def get(self, instance: Any) -> Any:
        raise NotImplementedError

    @abstractmethod
    def set(self, instance: Any, value: Any) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear(self, instance: Any) -> None:
        raise NotImplementedError

    @abstractmethod
    def has_value(self, instance: Any) -> bool:
        raise NotImplementedError

    def read(self, instance: Any) -> Any:
        """Current value, or UNSET when the field holds nothing."""
        if not self.has_value(instance):
            return UNSET
        return self.get(instance)

    def write(self, instance: Any, value: Any) -> None:
        """Install value; writing UNSET clears the field."""
        if value is UNSET:
            self.clear(instance)
        else:
            self.set(instance, value)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.stack_key == other.stack_key

    def __hash__(self) -> int:
        return hash((type(self), self.stack_key))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class AttrAccessor(AttributeAccessor):
    """Plain attribute access: getattr / setattr / delattr."""

    def __init__(self, name: str) -> None:
        if not isinstance(name, str) or not name:
            raise TypeError(f"attribute name must be a non-empty str, got {name!r}")
        self.name = name

    def get(self, instance: Any) -> Any:
        return getattr(instance, self.name)

    def set(self, instance: Any, value: Any) -> None:
        setattr(instance, self.name, value)

    def clear(self, instance: Any) -> None:
        # Clearing an already-unset field is not an error
        try:
            delattr(instance, self.name)
        except AttributeError:
            if self.has_value(instance):
                raise

    def has_value(self, instance: Any) -> bool:
        try:
            getattr(instance, self.name)
        except AttributeError:
            return False
        return True


class FunctionAccessor(AttributeAccessor):
    """
    Accessor built from plain callables.

    Wraps any get/set pair, e.g. a config object's get_option/set_option:

        FunctionAccessor(
            "verbosity",
            getter=lambda obj: obj.get_option("verbosity"),
            setter=lambda obj, v: obj.set_option("verbosity", v),
        )

    Without a clearer the field cannot be unset; without a tester it always
    counts as holding a value.
    """

    def __init__(
        self,
        name: str,
        getter: Callable[[Any], Any],
        setter: Callable[[Any, Any], None],
        clearer: Optional[Callable[[Any], None]] = None,
        tester: Optional[Callable[[Any], bool]] = None,
    ) -> None:
        self.name = name
        self._getter = getter
        self._setter = setter
        self._clearer = clearer
        self._tester = tester

    def get(self, instance: Any) -> Any:
        return self._getter(instance)

    def set(self, instance: Any, value: Any) -> None:
        self._setter(instance, value)

    def clear(self, instance: Any) -> None:
        if self._clearer is None:
            raise AttributeError(f"'{self.name}' cannot be cleared")
        self._clearer(instance)

    def has_value(self, instance: Any) -> bool:
        if self._tester is None:
            return True
        return bool(self._tester(instance))

    @property
    def stack_key(self) -> str:
        return f"{self.name}()"


def as_accessor(attribute: Any) -> AttributeAccessor:
    """Accept an accessor or an attribute name."""
    if isinstance(attribute, AttributeAccessor):
        return attribute
    if isinstance(attribute, str):
        return AttrAccessor(attribute)
    raise TypeError(
        f"expected an AttributeAccessor or attribute name, got {type(attribute).__name__}"
    )
