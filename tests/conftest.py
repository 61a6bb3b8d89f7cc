"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass, field
from typing import Any, ClassVar, overload

from lazyreflect import Lazy
from lazyreflect.config import reset_settings


class Sample:
    """Private field behind a public property, plus instance and static methods."""

    _value: str | None = None
    instances: ClassVar[int] = 0
    VERSION = "1.0"

    class Nested:
        pass

    def __init__(self, value: str | None = None) -> None:
        Sample.instances += 1
        if value is not None:
            self.value = value

    @property
    def value(self) -> str | None:
        return self._value

    @value.setter
    def value(self, new_value: str | None) -> None:
        self._value = new_value

    @property
    def read_only(self) -> str:
        return "fixed"

    def echo(self, s: str) -> str:
        return s

    def _private_method(self) -> None:
        pass

    def __mangled(self) -> str:
        return "mangled"

    @staticmethod
    def static_echo(s: str) -> str:
        return s

    @classmethod
    def create(cls, value: str) -> "Sample":
        return cls(value)


class DerivedSample(Sample):
    def derived_only(self) -> str:
        return "derived"


class Point:
    """Constructor overloads: (), (x, y) and (label)."""

    x: int
    y: int
    label: str | None

    @overload
    def __init__(self) -> None: ...

    @overload
    def __init__(self, x: int, y: int) -> None: ...

    @overload
    def __init__(self, label: str) -> None: ...

    def __init__(self, *args: Any) -> None:
        self.x, self.y, self.label = 0, 0, None
        if len(args) == 2:
            self.x, self.y = args
        elif len(args) == 1:
            self.label = args[0]


class Slotted:
    __slots__ = ("x", "__hidden")

    def __init__(self, x: int, hidden: int) -> None:
        self.x = x
        self.__hidden = hidden


@dataclass
class Record:
    name: str
    tags: list[str] = field(default_factory=list)
    registry: ClassVar[dict[str, int]] = {}


@pytest.fixture
def settings_reset():
    """Restore default settings after a test that changes them."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(scope="session")
def sample_cls():
    return Sample


@pytest.fixture(scope="session")
def derived_cls():
    return DerivedSample


@pytest.fixture(scope="session")
def point_cls():
    return Point


@pytest.fixture(scope="session")
def slotted_cls():
    return Slotted


@pytest.fixture(scope="session")
def record_cls():
    return Record


@pytest.fixture
def module_cell():
    """Lazy handle to the module defining the sample types."""
    return Lazy(lambda: sys.modules[Sample.__module__])


@pytest.fixture
def sample_type_cell():
    """Lazy handle to Sample."""
    return Lazy(lambda: Sample)
