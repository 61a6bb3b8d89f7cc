"""Core primitives: lazy cells, handles, coercion and the error taxonomy.

Architecture Note:
    core/ holds building blocks with no knowledge of how lookups happen.
    For the introspection backend see host/; for the public operations see
    resolve/ and invoke/.
"""

from lazyreflect.core.coercion import coerce, is_assignable
from lazyreflect.core.errors import (
    MemberNotFoundError,
    NullInputError,
    ReflectionError,
    TypeMismatchError,
)
from lazyreflect.core.handles import (
    AccessorHandle,
    AccessorKind,
    BindingFlags,
    ConstructorHandle,
    FieldHandle,
    MethodHandle,
)
from lazyreflect.core.lazy import CellState, Lazy, unwrap, value_of

__all__ = [
    # Lazy
    "Lazy",
    "CellState",
    "value_of",
    "unwrap",
    # Handles
    "BindingFlags",
    "AccessorKind",
    "MethodHandle",
    "AccessorHandle",
    "FieldHandle",
    "ConstructorHandle",
    # Coercion
    "coerce",
    "is_assignable",
    # Errors
    "ReflectionError",
    "NullInputError",
    "MemberNotFoundError",
    "TypeMismatchError",
]
