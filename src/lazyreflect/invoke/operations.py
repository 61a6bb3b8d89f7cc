"""Terminal operations: construct, invoke, read and write through handles.

Every operation accepts a handle directly or a Lazy cell yielding one, and
coerces its result to `as_type` (the default `object` accepts anything).
Nothing here is cached; each call re-executes.

Usage:
    widget = create_instance(widget_type, ["title"], as_type=Widget)
    html = invoke(render, widget, ["<p>"], as_type=str)
    count = invoke_static_by_name(widget_type, "instances", as_type=int)
    title = get_value(title_field, widget, as_type=str)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from lazyreflect.core.coercion import coerce
from lazyreflect.core.errors import NullInputError, TypeMismatchError
from lazyreflect.core.handles import BindingFlags, FieldHandle, MethodHandle
from lazyreflect.core.lazy import Lazy, unwrap
from lazyreflect.host import TypeSystem, get_type_system
from lazyreflect.resolve import TypeSource, get_method, resolve_owner, select_constructor

type MethodSource = MethodHandle | Lazy[MethodHandle]
type FieldSource = FieldHandle | Lazy[FieldHandle]

STATIC_BINDING = BindingFlags.PUBLIC | BindingFlags.STATIC


def _method(method: MethodSource | None) -> MethodHandle:
    handle = unwrap(method, "method")
    if not isinstance(handle, MethodHandle):
        raise TypeMismatchError(MethodHandle, type(handle), "'method' must resolve to a method")
    return handle


def _field(field: FieldSource | None) -> FieldHandle:
    handle = unwrap(field, "field")
    if not isinstance(handle, FieldHandle):
        raise TypeMismatchError(FieldHandle, type(handle), "'field' must resolve to a field")
    return handle


def _args(args: Sequence[Any] | None) -> tuple[Any, ...]:
    return () if args is None else tuple(args)


def create_instance[R](
    target: TypeSource | None,
    args: Sequence[Any] | None = (),
    as_type: type[R] | Any = object,
    *,
    host: TypeSystem | None = None,
) -> R:
    """Construct an instance through the constructor that best fits args.

    Args:
        target: Class, or Lazy class, to instantiate.
        args: Positional constructor arguments. Empty selects the no-argument
            constructor.
        as_type: Static type the new instance must be assignable to.
        host: Type system to use.

    Returns:
        The new instance.

    Raises:
        NullInputError: If target is None or its cell yields None.
        MemberNotFoundError: If no constructor accepts args.
        TypeMismatchError: If the instance is not assignable to as_type.
    """
    owner = resolve_owner(target, "target")  # type: ignore[arg-type]
    system = host or get_type_system()
    values = _args(args)
    constructor = select_constructor(owner, values, host=system)
    return coerce(system.construct(constructor, values), as_type)


def invoke[R](
    method: MethodSource | None,
    receiver: Any,
    args: Sequence[Any] | None = (),
    as_type: type[R] | Any = object,
    *,
    host: TypeSystem | None = None,
) -> R:
    """Call a method (or property accessor) on receiver.

    Static methods ignore receiver. Instance methods require an instance of
    the declaring type; violations surface from dispatch as TypeMismatchError.

    Args:
        method: Method handle, or Lazy method handle.
        receiver: Instance to call on.
        args: Positional arguments.
        as_type: Static type the result must be assignable to.
        host: Type system to dispatch through.

    Returns:
        The method's return value.

    Raises:
        NullInputError: If method is None or its cell yields None.
        TypeMismatchError: Bad receiver, arguments that don't fit, or a result
            not assignable to as_type.
    """
    handle = _method(method)
    result = (host or get_type_system()).invoke(handle, receiver, _args(args))
    return coerce(result, as_type)


def invoke_static[R](
    method: MethodSource | None,
    args: Sequence[Any] | None = (),
    as_type: type[R] | Any = object,
    *,
    host: TypeSystem | None = None,
) -> R:
    """Call a static method. Instance methods fail with TypeMismatchError.

    Raises:
        NullInputError: If method is None or its cell yields None.
        TypeMismatchError: If method is not static, the arguments don't fit,
            or the result is not assignable to as_type.
    """
    handle = _method(method)
    result = (host or get_type_system()).invoke(handle, None, _args(args))
    return coerce(result, as_type)


def invoke_static_by_name[R](
    type_cell: TypeSource | None,
    method_name: str,
    args: Sequence[Any] | None = (),
    as_type: type[R] | Any = object,
    *,
    binding: BindingFlags = STATIC_BINDING,
    host: TypeSystem | None = None,
) -> R:
    """Resolve a static method by name on a type and call it.

    Raises:
        NullInputError: If type_cell or method_name is None.
        MemberNotFoundError: If no static method has that name.
        TypeMismatchError: As for invoke_static.
    """
    if type_cell is None:
        raise NullInputError("type_cell")
    system = host or get_type_system()
    handle = get_method(type_cell, method_name, binding, host=system)
    return invoke_static(handle, args, as_type, host=system)


def get_value[R](
    field: FieldSource | None,
    receiver: Any,
    as_type: type[R] | Any = object,
    *,
    host: TypeSystem | None = None,
) -> R:
    """Read a field's current value. Static fields ignore receiver.

    Raises:
        NullInputError: If field is None or its cell yields None.
        TypeMismatchError: Bad receiver, or a value not assignable to as_type.
    """
    handle = _field(field)
    return coerce((host or get_type_system()).get_field(handle, receiver), as_type)


def set_value(
    field: FieldSource | None,
    receiver: Any,
    value: Any,
    *,
    host: TypeSystem | None = None,
) -> None:
    """Write a field. Static fields ignore receiver.

    Raises:
        NullInputError: If field is None or its cell yields None.
        TypeMismatchError: Bad receiver.
    """
    handle = _field(field)
    (host or get_type_system()).set_field(handle, receiver, value)
