"""Host type system backed by Python's own introspection.

Maps the binding model onto Python conventions:
- Visibility: a leading underscore makes a name non-public, dunders stay public.
  `__name` members are also found under their mangled `_Cls__name` key.
- Staticness: staticmethod/classmethod (builtin ones included) are static,
  functions and builtin method descriptors are instance methods, properties
  are instance members.
- Fields: annotated attributes, __slots__ entries and dataclass fields are
  instance fields; ClassVar annotations and plain class-level data are static.

Member lookup follows attribute resolution: the first class in the MRO
defining the name owns it, and the binding filter is applied to that entry.
A name shadowed by a member of another kind is not found.

Usage:
    host = PythonTypeSystem()
    handle = host.find_method(Widget, "render", BindingFlags.DEFAULT)
    host.invoke(handle, Widget(), ["<p>"])
"""

from __future__ import annotations

import inspect
import logging
import re
import types
import typing
from collections.abc import Iterator, Sequence
from typing import Any, ClassVar

from lazyreflect.config import get_settings
from lazyreflect.core.errors import TypeMismatchError
from lazyreflect.core.handles import (
    AccessorHandle,
    AccessorKind,
    BindingFlags,
    ConstructorHandle,
    FieldHandle,
    MethodHandle,
)

logger = logging.getLogger(__name__)

_CLASSVAR_STRING = re.compile(r"^\s*(?:[A-Za-z_]\w*\.)*ClassVar\b")


def is_public_name(name: str) -> bool:
    """Check whether name is public under Python naming conventions."""
    if name.startswith("__") and name.endswith("__"):
        return True
    return not name.startswith("_")


def full_name(cls: type) -> str:
    """Fully qualified name of cls, as accepted by find_type."""
    return f"{cls.__module__}.{cls.__qualname__}"


def _attribute_names(klass: type, name: str) -> tuple[str, ...]:
    if name.startswith("__") and not name.endswith("__"):
        return (name, f"_{klass.__name__.lstrip('_')}{name}")
    return (name,)


def _own_annotations(klass: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(klass)
    except NameError:
        return dict(vars(klass).get("__annotations__", {}))


def _is_classvar(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return _CLASSVAR_STRING.match(annotation) is not None
    return annotation is ClassVar or typing.get_origin(annotation) is ClassVar


def _method_is_static(raw: Any) -> bool | None:
    """Staticness of a namespace entry, or None when it is not a method."""
    if isinstance(raw, (staticmethod, classmethod, types.ClassMethodDescriptorType)):
        return True
    if isinstance(raw, property):
        return None
    if inspect.isfunction(raw) or inspect.ismethoddescriptor(raw):
        return False
    return None


def _is_plain_data(raw: Any) -> bool:
    return not isinstance(raw, type) and not hasattr(type(raw), "__get__")


def _is_shadowed(field: FieldHandle, receiver_type: type) -> bool:
    """True when a subclass member, not the field, answers attribute lookup."""
    for klass in receiver_type.__mro__:
        if klass is field.declaring_type:
            return False
        if field.attribute in vars(klass):
            return True
    return False


def _signature(target: Any, *, drop_first: bool = False) -> inspect.Signature | None:
    try:
        try:
            sig = inspect.signature(target, eval_str=True)
        except NameError:
            # Unresolvable forward references stay as strings
            sig = inspect.signature(target)
    except (TypeError, ValueError):
        return None
    if drop_first:
        sig = sig.replace(parameters=list(sig.parameters.values())[1:])
    return sig


class PythonTypeSystem:
    """TypeSystem implementation over modules, classes and the descriptor protocol.

    Args:
        search_bases: Search base classes during lookup. Defaults to
            ReflectionSettings.search_bases, read on every lookup.
    """

    def __init__(self, search_bases: bool | None = None) -> None:
        self._search_bases = search_bases

    def _namespaces(self, owner: type, binding: BindingFlags) -> tuple[type, ...]:
        search = self._search_bases
        if search is None:
            search = get_settings().search_bases
        if binding & BindingFlags.DECLARED_ONLY or not search:
            return (owner,)
        return owner.__mro__

    def _entries(self, owner: type, name: str, binding: BindingFlags) -> Iterator[tuple[type, str]]:
        """Yield (class, attribute) pairs where name may live, in lookup order."""
        for klass in self._namespaces(owner, binding):
            for attribute in _attribute_names(klass, name):
                yield klass, attribute

    # Types

    def find_type(self, module: Any, qualified_name: str) -> type | None:
        """Find a class by qualified name (`Outer.Inner`) or full name (`pkg.mod.Outer.Inner`).

        Args:
            module: Module (or any namespace object) to search.
            qualified_name: Name relative to the module or prefixed by its __name__.

        Returns:
            The class, or None if the path is missing or does not name a class.
        """
        path = qualified_name
        module_name = getattr(module, "__name__", None)
        if module_name and qualified_name.startswith(f"{module_name}."):
            path = qualified_name[len(module_name) + 1 :]

        target: Any = module
        for part in path.split("."):
            if not part:
                return None
            target = getattr(target, part, None)
            if target is None:
                return None
        if not isinstance(target, type):
            return None
        logger.debug("Resolved type %s in %s", qualified_name, module_name)
        return target

    # Members

    def find_method(self, owner: type, name: str, binding: BindingFlags) -> MethodHandle | None:
        for klass, attribute in self._entries(owner, name, binding):
            namespace = vars(klass)
            if attribute not in namespace:
                continue
            raw = namespace[attribute]
            is_static = _method_is_static(raw)
            if is_static is None:
                return None
            is_public = is_public_name(name)
            if not binding.admits(is_public=is_public, is_static=is_static):
                return None
            return MethodHandle(
                owner=owner,
                declaring_type=klass,
                name=name,
                attribute=attribute,
                function=raw,
                is_static=is_static,
                is_public=is_public,
            )
        return None

    def find_property(
        self, owner: type, name: str, kind: AccessorKind, binding: BindingFlags
    ) -> AccessorHandle | None:
        for klass, attribute in self._entries(owner, name, binding):
            namespace = vars(klass)
            if attribute not in namespace:
                continue
            raw = namespace[attribute]
            if not isinstance(raw, property):
                return None
            accessor = raw.fget if kind is AccessorKind.GET else raw.fset
            is_public = is_public_name(name)
            if accessor is None or not binding.admits(is_public=is_public, is_static=False):
                return None
            return AccessorHandle(
                owner=owner,
                declaring_type=klass,
                name=getattr(accessor, "__name__", name),
                attribute=attribute,
                function=accessor,
                is_static=False,
                is_public=is_public,
                property_name=name,
                kind=kind,
            )
        return None

    def find_field(self, owner: type, name: str, binding: BindingFlags) -> FieldHandle | None:
        if name.startswith("__") and name.endswith("__"):
            return None
        for klass, attribute in self._entries(owner, name, binding):
            annotations = _own_annotations(klass)
            namespace = vars(klass)
            if attribute in annotations:
                annotation = annotations[attribute]
                is_static = _is_classvar(annotation)
            elif attribute in namespace:
                raw = namespace[attribute]
                annotation = None
                if inspect.ismemberdescriptor(raw):
                    is_static = False
                elif _is_plain_data(raw):
                    is_static = True
                else:
                    return None
            else:
                continue

            is_public = is_public_name(name)
            if not binding.admits(is_public=is_public, is_static=is_static):
                return None
            return FieldHandle(
                owner=owner,
                declaring_type=klass,
                name=name,
                attribute=attribute,
                is_static=is_static,
                is_public=is_public,
                annotation=annotation,
            )
        return None

    def find_constructors(self, owner: type) -> list[ConstructorHandle]:
        """List constructor candidates: declared __init__ overloads, else the class signature."""
        init = getattr(owner, "__init__", None)
        overloads = typing.get_overloads(init) if inspect.isfunction(init) else []
        if overloads:
            return [
                ConstructorHandle(
                    owner=owner,
                    signature=_signature(overload, drop_first=True),
                    overload_index=index,
                )
                for index, overload in enumerate(overloads)
            ]
        return [ConstructorHandle(owner=owner, signature=_signature(owner))]

    # Dispatch

    def construct(self, constructor: ConstructorHandle, args: Sequence[Any]) -> Any:
        return constructor.owner(*args)

    def invoke(self, method: MethodHandle, receiver: Any, args: Sequence[Any]) -> Any:
        """Call method, checking the receiver and the argument list first.

        Raises:
            TypeMismatchError: If an instance method gets no receiver or one of
                the wrong type, or if args do not fit the method's signature.
        """
        if not method.is_static:
            self._check_receiver(method.declaring_type, receiver, str(method))

        sig = method.signature()
        if sig is not None:
            try:
                sig.bind(*args)
            except TypeError as exc:
                raise TypeMismatchError(
                    sig, tuple(type(arg) for arg in args), f"{method}: {exc}"
                ) from exc
        return method.bound(receiver)(*args)

    def get_field(self, field: FieldHandle, receiver: Any) -> Any:
        if field.is_static:
            return getattr(field.declaring_type, field.attribute, None)
        self._check_receiver(field.declaring_type, receiver, str(field))
        try:
            return getattr(receiver, field.attribute)
        except AttributeError:
            if _is_shadowed(field, type(receiver)):
                raise
            # Declared but never assigned reads as default-initialized
            return None

    def set_field(self, field: FieldHandle, receiver: Any, value: Any) -> None:
        if field.is_static:
            setattr(field.declaring_type, field.attribute, value)
            return
        self._check_receiver(field.declaring_type, receiver, str(field))
        setattr(receiver, field.attribute, value)

    @staticmethod
    def _check_receiver(declaring_type: type, receiver: Any, member: str) -> None:
        if receiver is None:
            raise TypeMismatchError(declaring_type, None, f"{member} requires a receiver")
        if not isinstance(receiver, declaring_type):
            raise TypeMismatchError(declaring_type, type(receiver), f"receiver of {member}")
