"""Coercion of dynamically obtained values to a caller-requested static type.

Coercion validates, it never converts: a compatible value is returned as is,
anything else raises TypeMismatchError. Supported targets are plain classes,
Any/object, None, unions (including Optional and `X | Y`), Literal,
Annotated, NewType, TypeVar bounds and subscripted generics (checked against
their origin only). Following PEP 484, int is accepted for float, and int or
float for complex.
"""

from __future__ import annotations

import types
from typing import Annotated, Any, Literal, TypeAliasType, TypeVar, Union, get_args, get_origin

from lazyreflect.config import get_settings
from lazyreflect.core.errors import TypeMismatchError

_NUMERIC_PROMOTIONS: dict[type, tuple[type, ...]] = {
    float: (int,),
    complex: (int, float),
}


def is_assignable(value: Any, target: Any, *, allow_none: bool | None = None) -> bool:
    """Check whether value may be handed out as target.

    Args:
        value: Runtime value.
        target: Requested static type.
        allow_none: Let None pass for any target. Defaults to
            ReflectionSettings.allow_none.

    Returns:
        True if value is compatible with target.

    Raises:
        TypeMismatchError: If target cannot be checked at runtime (forward
            references, non runtime-checkable protocols).
    """
    if allow_none is None:
        allow_none = get_settings().allow_none

    if target is Any or target is object:
        return True
    if target is None or target is types.NoneType:
        return value is None

    origin = get_origin(target)

    if origin is Union or origin is types.UnionType:
        return any(is_assignable(value, arg, allow_none=allow_none) for arg in get_args(target))
    if origin is Annotated:
        return is_assignable(value, get_args(target)[0], allow_none=allow_none)
    if origin is Literal:
        return value in get_args(target)

    if value is None:
        return allow_none

    if isinstance(target, TypeVar):
        if target.__bound__ is not None:
            return is_assignable(value, target.__bound__, allow_none=allow_none)
        if target.__constraints__:
            return any(
                is_assignable(value, c, allow_none=allow_none) for c in target.__constraints__
            )
        return True
    supertype = getattr(target, "__supertype__", None)
    if supertype is not None:  # NewType
        return is_assignable(value, supertype, allow_none=allow_none)
    if isinstance(target, TypeAliasType):
        return is_assignable(value, target.__value__, allow_none=allow_none)

    check = origin if origin is not None else target
    if not isinstance(check, type):
        raise TypeMismatchError(target, type(value), "target type is not checkable at runtime")

    if isinstance(value, bool) and check in _NUMERIC_PROMOTIONS:
        return False
    if check in _NUMERIC_PROMOTIONS and isinstance(value, _NUMERIC_PROMOTIONS[check]):
        return True
    try:
        return isinstance(value, check)
    except TypeError as exc:
        raise TypeMismatchError(target, type(value), str(exc)) from exc


def coerce[T](value: Any, target: type[T] | Any, *, allow_none: bool | None = None) -> T:
    """Return value typed as target, or fail.

    Args:
        value: Runtime value, typically a call result or field read.
        target: Requested static type. `object` accepts anything.
        allow_none: Override for ReflectionSettings.allow_none.

    Returns:
        value unchanged.

    Raises:
        TypeMismatchError: If value is not assignable to target.
    """
    if not is_assignable(value, target, allow_none=allow_none):
        raise TypeMismatchError(target, type(value))
    return value  # type: ignore[no-any-return]


def exact_match(value: Any, target: Any) -> bool:
    """True when value's runtime type is exactly target (used for overload ranking)."""
    origin = get_origin(target)
    check = origin if origin is not None else target
    if value is None:
        return check is None or check is types.NoneType
    return type(value) is check
