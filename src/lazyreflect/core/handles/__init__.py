"""Binding filters and member handles."""

from lazyreflect.core.handles.models import (
    AccessorHandle,
    AccessorKind,
    BindingFlags,
    ConstructorHandle,
    FieldHandle,
    MethodHandle,
)

__all__ = [
    "BindingFlags",
    "AccessorKind",
    "MethodHandle",
    "AccessorHandle",
    "FieldHandle",
    "ConstructorHandle",
]
