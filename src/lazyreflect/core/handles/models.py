"""Handle models: binding filters and opaque references to types' members.

Handles are frozen and compare equal when they identify the same member, so
two independent lookups of the same method yield equal handles.
"""

from __future__ import annotations

import inspect
import types
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import Any


class BindingFlags(Flag):
    """Selects which members a lookup considers.

    Combine one or both visibility flags with one or both staticness flags.
    A filter missing either half matches nothing.
    """

    PUBLIC = 1
    NON_PUBLIC = 2
    INSTANCE = 4
    STATIC = 8
    DECLARED_ONLY = 16  # Don't search base classes

    DEFAULT = PUBLIC | INSTANCE
    ALL = PUBLIC | NON_PUBLIC | INSTANCE | STATIC

    def admits(self, *, is_public: bool, is_static: bool) -> bool:
        """Check whether a member with the given traits passes this filter.

        Args:
            is_public: Member's visibility.
            is_static: Whether the member belongs to the type rather than instances.

        Returns:
            True if both visibility and staticness are selected.
        """
        visibility = BindingFlags.PUBLIC if is_public else BindingFlags.NON_PUBLIC
        staticness = BindingFlags.STATIC if is_static else BindingFlags.INSTANCE
        return bool(self & visibility) and bool(self & staticness)


class AccessorKind(Enum):
    """Which half of a property an accessor handle refers to."""

    GET = auto()
    SET = auto()


@dataclass(frozen=True, slots=True)
class MethodHandle:
    """A method found on a type.

    Attributes:
        owner: Type the lookup ran against.
        declaring_type: Class in owner's MRO whose namespace holds the method.
        name: Name as requested (before private name mangling).
        attribute: Key in declaring_type.__dict__.
        function: Raw namespace entry (function, staticmethod, classmethod, ...).
        is_static: True for staticmethod/classmethod members.
        is_public: True unless the name starts with an underscore.
    """

    owner: type
    declaring_type: type
    name: str
    attribute: str
    function: Any = field(compare=False)
    is_static: bool = False
    is_public: bool = True

    def bound(self, receiver: Any) -> Callable[..., Any]:
        """Bind the raw member through the descriptor protocol.

        Static members bind to owner; instance members bind to receiver.
        """
        if self.is_static:
            return self.function.__get__(None, self.owner)
        return self.function.__get__(receiver, type(receiver))

    def signature(self) -> inspect.Signature | None:
        """Signature of the bound callable, or None when it cannot be introspected."""
        target = self.function
        drop_first = not isinstance(target, staticmethod)
        if isinstance(target, types.ClassMethodDescriptorType):
            # Builtin classmethods only report a usable signature once bound
            target = target.__get__(None, self.owner)
            drop_first = False
        elif isinstance(target, (staticmethod, classmethod)):
            target = target.__func__
        try:
            sig = inspect.signature(target)
        except (TypeError, ValueError):
            return None
        params = list(sig.parameters.values())
        # Drop the implicit self/cls parameter
        if drop_first and params:
            if params[0].kind in (params[0].POSITIONAL_ONLY, params[0].POSITIONAL_OR_KEYWORD):
                params = params[1:]
        return sig.replace(parameters=params)

    def __str__(self) -> str:
        return f"{self.declaring_type.__qualname__}.{self.name}"


@dataclass(frozen=True, slots=True)
class AccessorHandle(MethodHandle):
    """Getter or setter of a property.

    Attributes:
        property_name: Name of the property the accessor belongs to.
        kind: GET or SET.
    """

    property_name: str = ""
    kind: AccessorKind = AccessorKind.GET

    def bound(self, receiver: Any) -> Callable[..., Any]:
        return self.function.__get__(receiver, type(receiver))

    def __str__(self) -> str:
        prefix = "get" if self.kind is AccessorKind.GET else "set"
        return f"{self.declaring_type.__qualname__}.{self.property_name}.{prefix}"


@dataclass(frozen=True, slots=True)
class FieldHandle:
    """A data attribute declared on a type.

    Instance fields come from annotations, __slots__ or dataclass fields.
    Static fields are ClassVar annotations and plain class-level data.

    Attributes:
        owner: Type the lookup ran against.
        declaring_type: Class in owner's MRO that declares the field.
        name: Name as requested (before private name mangling).
        attribute: Attribute name used for get/set.
        is_static: True for class-level fields.
        is_public: True unless the name starts with an underscore.
        annotation: Declared annotation, if any (may be a string).
    """

    owner: type
    declaring_type: type
    name: str
    attribute: str
    is_static: bool = False
    is_public: bool = True
    annotation: Any = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.declaring_type.__qualname__}.{self.name}"


@dataclass(frozen=True, slots=True)
class ConstructorHandle:
    """The constructor signature selected for an argument list.

    Attributes:
        owner: Type being constructed.
        signature: Selected signature (self excluded), or None when the
            type's constructor cannot be introspected.
        overload_index: Position among the type's declared overloads, or
            None when the type has no overloads.
    """

    owner: type
    signature: inspect.Signature | None = field(default=None, compare=False)
    overload_index: int | None = None

    def __str__(self) -> str:
        return f"{self.owner.__qualname__}{self.signature or '(...)'}"
