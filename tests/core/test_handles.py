"""Tests for binding filters and handle models."""

import pytest

from lazyreflect.core.handles import AccessorHandle, AccessorKind, BindingFlags, MethodHandle


def test_default_filter_is_public_instance():
    assert BindingFlags.DEFAULT == BindingFlags.PUBLIC | BindingFlags.INSTANCE


@pytest.mark.parametrize(
    ("binding", "is_public", "is_static", "expected"),
    [
        (BindingFlags.DEFAULT, True, False, True),
        (BindingFlags.DEFAULT, False, False, False),
        (BindingFlags.DEFAULT, True, True, False),
        (BindingFlags.NON_PUBLIC | BindingFlags.INSTANCE, False, False, True),
        (BindingFlags.PUBLIC | BindingFlags.STATIC, True, True, True),
        (BindingFlags.ALL, False, True, True),
    ],
)
def test_admits(binding, is_public, is_static, expected):
    assert binding.admits(is_public=is_public, is_static=is_static) is expected


def test_filter_missing_staticness_matches_nothing():
    """A visibility-only filter selects no members."""
    binding = BindingFlags.PUBLIC | BindingFlags.NON_PUBLIC
    assert not binding.admits(is_public=True, is_static=False)
    assert not binding.admits(is_public=True, is_static=True)


def test_declared_only_does_not_affect_admission():
    binding = BindingFlags.DEFAULT | BindingFlags.DECLARED_ONLY
    assert binding.admits(is_public=True, is_static=False)


class Widget:
    def render(self, markup: str) -> str:
        return markup

    @staticmethod
    def build(name: str) -> str:
        return name

    @classmethod
    def kind(cls) -> str:
        return cls.__name__

    @property
    def title(self) -> str:
        return "t"


def _handle(attribute: str, is_static: bool = False) -> MethodHandle:
    return MethodHandle(
        owner=Widget,
        declaring_type=Widget,
        name=attribute,
        attribute=attribute,
        function=vars(Widget)[attribute],
        is_static=is_static,
    )


def test_handles_for_same_member_are_equal_and_hashable():
    first = _handle("render")
    second = _handle("render")

    assert first == second
    assert len({first, second}) == 1


def test_method_signature_drops_self():
    sig = _handle("render").signature()
    assert list(sig.parameters) == ["markup"]


def test_static_signature_keeps_all_parameters():
    sig = _handle("build", is_static=True).signature()
    assert list(sig.parameters) == ["name"]


def test_classmethod_binds_to_owner():
    bound = _handle("kind", is_static=True).bound(None)
    assert bound() == "Widget"


def test_accessor_handle_describes_property():
    prop = vars(Widget)["title"]
    handle = AccessorHandle(
        owner=Widget,
        declaring_type=Widget,
        name="title",
        attribute="title",
        function=prop.fget,
        property_name="title",
        kind=AccessorKind.GET,
    )

    assert str(handle) == "Widget.title.get"
    assert handle.bound(Widget())() == "t"
    assert handle != _handle("render")
