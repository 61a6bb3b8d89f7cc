"""Type and member resolvers producing lazy cells.

Usage:
    module = Lazy(lambda: importlib.import_module("shop.models"))
    order = lazy_get_type(module, "shop.models.Order")
    total = lazy_get_method(order, "total")
    secret = lazy_get_field(order, "_discount", BindingFlags.NON_PUBLIC | BindingFlags.INSTANCE)

    # Nothing has been looked up yet. First access resolves and caches:
    total.value

A None cell argument fails immediately. Missing members fail only when the
cell is first read, and that failure is replayed on every later read.
"""

from __future__ import annotations

import logging
from typing import Any

from lazyreflect.core.errors import MemberNotFoundError, NullInputError, TypeMismatchError
from lazyreflect.core.handles import (
    AccessorHandle,
    AccessorKind,
    BindingFlags,
    FieldHandle,
    MethodHandle,
)
from lazyreflect.core.lazy import Lazy, unwrap
from lazyreflect.host import TypeSystem, get_type_system

logger = logging.getLogger(__name__)

type TypeSource = type | Lazy[type]
"""A type descriptor given directly or through a cell."""


def _require(value: Any, argument: str) -> None:
    if value is None:
        raise NullInputError(argument)


def resolve_owner(type_cell: TypeSource, argument: str = "type_cell") -> type:
    """Force a type argument and check that it really is a class.

    Raises:
        NullInputError: If the argument or its cell's value is None.
        TypeMismatchError: If it resolves to something that is not a class.
    """
    owner = unwrap(type_cell, argument)
    if not isinstance(owner, type):
        raise TypeMismatchError(type, type(owner), f"'{argument}' must resolve to a class")
    return owner


def lazy_get_type(
    module_cell: Any, qualified_name: str, *, host: TypeSystem | None = None
) -> Lazy[type]:
    """Build a cell resolving a class by name inside a module.

    Args:
        module_cell: Lazy module, or a module.
        qualified_name: `Outer.Inner` relative to the module, or the full
            name `pkg.mod.Outer.Inner`.
        host: Type system to query. Defaults to get_type_system().

    Returns:
        Cell yielding the class.

    Raises:
        NullInputError: Immediately, if module_cell or qualified_name is None;
            on evaluation, if the module cell yields None.
        MemberNotFoundError: On evaluation, if no class has that name.
    """
    _require(module_cell, "module_cell")
    _require(qualified_name, "qualified_name")
    system = host or get_type_system()

    def resolve() -> type:
        module = unwrap(module_cell, "module_cell")
        found = system.find_type(module, qualified_name)
        if found is None:
            raise MemberNotFoundError(module, qualified_name, detail="no such type")
        return found

    return Lazy(resolve)


def _find_method(
    system: TypeSystem, type_cell: TypeSource, name: str, binding: BindingFlags
) -> MethodHandle:
    owner = resolve_owner(type_cell)
    handle = system.find_method(owner, name, binding)
    if handle is None:
        raise MemberNotFoundError(owner, name, binding, "no such method")
    logger.debug("Resolved method %s", handle)
    return handle


def lazy_get_method(
    type_cell: TypeSource,
    name: str,
    binding: BindingFlags = BindingFlags.DEFAULT,
    *,
    host: TypeSystem | None = None,
) -> Lazy[MethodHandle]:
    """Build a cell resolving a method on a type.

    Args:
        type_cell: Lazy type, or a type.
        name: Method name.
        binding: Members to consider. Defaults to public instance methods.
        host: Type system to query.

    Returns:
        Cell yielding the method handle.

    Raises:
        NullInputError: Immediately, if type_cell or name is None.
        MemberNotFoundError: On evaluation, if no method passes the filter.
    """
    _require(type_cell, "type_cell")
    _require(name, "name")
    system = host or get_type_system()
    return Lazy(lambda: _find_method(system, type_cell, name, binding))


def get_method(
    type_cell: TypeSource,
    name: str,
    binding: BindingFlags = BindingFlags.DEFAULT,
    *,
    host: TypeSystem | None = None,
) -> MethodHandle:
    """Resolve a method right away.

    Same contract as lazy_get_method, except MemberNotFoundError is raised
    by this call.
    """
    _require(type_cell, "type_cell")
    _require(name, "name")
    return _find_method(host or get_type_system(), type_cell, name, binding)


def lazy_get_property(
    type_cell: TypeSource,
    name: str,
    getter: bool = True,
    binding: BindingFlags = BindingFlags.DEFAULT,
    *,
    host: TypeSystem | None = None,
) -> Lazy[AccessorHandle]:
    """Build a cell resolving a property's getter or setter.

    Args:
        type_cell: Lazy type, or a type.
        name: Property name.
        getter: True for the getter, False for the setter.
        binding: Members to consider.
        host: Type system to query.

    Returns:
        Cell yielding the accessor handle. Invoke it with `invoke`.

    Raises:
        NullInputError: Immediately, if type_cell or name is None.
        MemberNotFoundError: On evaluation, if the property is absent, filtered
            out, or lacks the requested accessor.
    """
    _require(type_cell, "type_cell")
    _require(name, "name")
    system = host or get_type_system()
    kind = AccessorKind.GET if getter else AccessorKind.SET

    def resolve() -> AccessorHandle:
        owner = resolve_owner(type_cell)
        handle = system.find_property(owner, name, kind, binding)
        if handle is None:
            raise MemberNotFoundError(owner, name, binding, f"no such property {kind.name.lower()}ter")
        logger.debug("Resolved property accessor %s", handle)
        return handle

    return Lazy(resolve)


def lazy_get_field(
    type_cell: TypeSource,
    name: str,
    binding: BindingFlags = BindingFlags.DEFAULT,
    *,
    host: TypeSystem | None = None,
) -> Lazy[FieldHandle]:
    """Build a cell resolving a data field.

    Raises:
        NullInputError: Immediately, if type_cell or name is None.
        MemberNotFoundError: On evaluation, if no field passes the filter.
    """
    _require(type_cell, "type_cell")
    _require(name, "name")
    system = host or get_type_system()

    def resolve() -> FieldHandle:
        owner = resolve_owner(type_cell)
        handle = system.find_field(owner, name, binding)
        if handle is None:
            raise MemberNotFoundError(owner, name, binding, "no such field")
        logger.debug("Resolved field %s", handle)
        return handle

    return Lazy(resolve)
