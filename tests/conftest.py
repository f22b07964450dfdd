"""
Pytest configuration and shared fixtures for all attrlocal tests.

Provides small host classes exercising the different ways a field can be
declared: a Localized descriptor, a plain attribute with a decorator-added
handle, and a property with a validating setter.
"""

import sys
import warnings
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from attrlocal import Localized, localizes
from attrlocal.utils.config import VOID_WARNING_ENV


# =============================================================================
# Host classes
# =============================================================================

class Foo:
    """Localized descriptor with both handle kinds."""
    bar = Localized(
        handles={"set_local_bar": "localize", "touch_bar": "localize_void"},
    )

    def __init__(self, bar=None):
        if bar is not None:
            self.bar = bar


@localizes(set_local_level="level")
class Plain:
    """Ordinary instance attribute, handle added by decorator."""

    def __init__(self, level=0):
        self.level = level


class Validated:
    """Property whose setter rejects negative values and records writes."""

    def __init__(self, size=1):
        self.writes = []
        self._size = size

    @property
    def size(self):
        return self._size

    @size.setter
    def size(self, value):
        if value < 0:
            raise ValueError("size must be non-negative")
        self.writes.append(value)
        self._size = value


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def foo_cls():
    return Foo


@pytest.fixture
def foo():
    return Foo(bar=1)


@pytest.fixture
def plain():
    return Plain(level=10)


@pytest.fixture
def validated():
    return Validated(size=1)


@pytest.fixture
def void_warnings_enabled(monkeypatch):
    """Make sure an inherited environment does not silence the advisory."""
    monkeypatch.delenv(VOID_WARNING_ENV, raising=False)


@pytest.fixture
def no_warnings():
    """Turn any warning raised inside the test into an error."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        yield


def pytest_configure(config):
    """Register custom markers for test organization."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
