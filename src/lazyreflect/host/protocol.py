"""Host type-system protocol for swappable introspection backends.

The host answers the primitive questions the resolvers and operations ask:
find a type in a module, find a member on a type, construct, invoke, and
read or write fields. Lookups return None for "not found"; raising the
taxonomy errors is the caller's job.

Usage:
    host = PythonTypeSystem()
    cell = lazy_get_type(module_cell, "pkg.mod.Widget", host=host)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from lazyreflect.core.handles import (
    AccessorHandle,
    AccessorKind,
    BindingFlags,
    ConstructorHandle,
    FieldHandle,
    MethodHandle,
)


@runtime_checkable
class TypeSystem(Protocol):
    """Abstract introspection interface. Implementations handle actual lookups."""

    def find_type(self, module: Any, qualified_name: str) -> type | None:
        """Find a class by qualified or full name inside module."""
        ...

    def find_method(self, owner: type, name: str, binding: BindingFlags) -> MethodHandle | None:
        """Find a method admitted by binding."""
        ...

    def find_property(
        self, owner: type, name: str, kind: AccessorKind, binding: BindingFlags
    ) -> AccessorHandle | None:
        """Find a property's getter or setter admitted by binding."""
        ...

    def find_field(self, owner: type, name: str, binding: BindingFlags) -> FieldHandle | None:
        """Find a data field admitted by binding."""
        ...

    def find_constructors(self, owner: type) -> list[ConstructorHandle]:
        """List candidate constructors in declaration order."""
        ...

    def construct(self, constructor: ConstructorHandle, args: Sequence[Any]) -> Any:
        """Create a new instance through constructor."""
        ...

    def invoke(self, method: MethodHandle, receiver: Any, args: Sequence[Any]) -> Any:
        """Call method. Static methods ignore receiver."""
        ...

    def get_field(self, field: FieldHandle, receiver: Any) -> Any:
        """Read field. Static fields ignore receiver."""
        ...

    def set_field(self, field: FieldHandle, receiver: Any, value: Any) -> None:
        """Write field. Static fields ignore receiver."""
        ...
