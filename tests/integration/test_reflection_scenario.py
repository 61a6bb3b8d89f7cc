"""End-to-end: module -> type -> member chains driving real calls."""

import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lazyreflect import (
    BindingFlags,
    Lazy,
    MemberNotFoundError,
    create_instance,
    full_name,
    get_value,
    invoke,
    invoke_static,
    lazy_get_field,
    lazy_get_method,
    lazy_get_type,
)

NON_PUBLIC_INSTANCE = BindingFlags.NON_PUBLIC | BindingFlags.INSTANCE
PUBLIC_STATIC = BindingFlags.PUBLIC | BindingFlags.STATIC


@pytest.fixture(scope="session")
def chain(sample_cls):
    """Resolver chain built once, shared across the scenario."""
    module = Lazy(lambda: sys.modules[sample_cls.__module__])
    sample_type = lazy_get_type(module, full_name(sample_cls))
    return {
        "type": sample_type,
        "echo": lazy_get_method(sample_type, "echo"),
        "static_echo": lazy_get_method(sample_type, "static_echo", PUBLIC_STATIC),
        "field": lazy_get_field(sample_type, "_value", NON_PUBLIC_INSTANCE),
    }


def test_instance_method_identity(chain):
    instance = create_instance(chain["type"])
    assert invoke(chain["echo"], instance, ["x"], as_type=str) == "x"


def test_static_method_identity(chain):
    assert invoke_static(chain["static_echo"], ["y"], as_type=str) == "y"


def test_construct_then_read_private_field(chain):
    instance = create_instance(chain["type"], ["z"])
    assert get_value(chain["field"], instance, as_type=str) == "z"


def test_missing_method_fails_only_on_read(chain):
    cell = lazy_get_method(chain["type"], "Missing")

    assert not cell.is_value_created
    with pytest.raises(MemberNotFoundError):
        cell.value


@given(value=st.text(min_size=1))
def test_constructor_value_round_trips_through_field(chain, value):
    """PROPERTY: Constructing with v and reading the backing field returns v unchanged."""
    instance = create_instance(chain["type"], [value])
    assert get_value(chain["field"], instance, as_type=str) is value


@given(value=st.text())
def test_instance_and_static_echo_agree(chain, value):
    instance = create_instance(chain["type"])
    assert invoke(chain["echo"], instance, [value]) == invoke_static(chain["static_echo"], [value])
