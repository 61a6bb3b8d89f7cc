"""lazyreflect: lazily resolved, cached reflection for Python.

Usage:
    import importlib
    from lazyreflect import Lazy, create_instance, invoke, lazy_get_method, lazy_get_type

    module = Lazy(lambda: importlib.import_module("shop.models"))
    order_type = lazy_get_type(module, "shop.models.Order")
    total = lazy_get_method(order_type, "total")

    order = create_instance(order_type, [42])
    invoke(total, order, as_type=int)   # lookup happens here, once
    invoke(total, order, as_type=int)   # cached handle, fresh call
"""

__version__ = "0.1.0"

# Configuration
from lazyreflect.config import ReflectionSettings, configure, get_settings

# Core primitives
from lazyreflect.core import (
    AccessorHandle,
    AccessorKind,
    BindingFlags,
    CellState,
    ConstructorHandle,
    FieldHandle,
    Lazy,
    MemberNotFoundError,
    MethodHandle,
    NullInputError,
    ReflectionError,
    TypeMismatchError,
    coerce,
    is_assignable,
    value_of,
)

# Host
from lazyreflect.host import (
    PythonTypeSystem,
    TypeSystem,
    full_name,
    get_type_system,
    set_type_system,
)

# Operations
from lazyreflect.invoke import (
    create_instance,
    get_value,
    invoke,
    invoke_static,
    invoke_static_by_name,
    set_value,
)

# Resolvers
from lazyreflect.resolve import (
    get_method,
    lazy_get_constructor,
    lazy_get_field,
    lazy_get_method,
    lazy_get_property,
    lazy_get_type,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Lazy",
    "CellState",
    "value_of",
    "BindingFlags",
    "AccessorKind",
    "MethodHandle",
    "AccessorHandle",
    "FieldHandle",
    "ConstructorHandle",
    "coerce",
    "is_assignable",
    # Errors
    "ReflectionError",
    "NullInputError",
    "MemberNotFoundError",
    "TypeMismatchError",
    # Host
    "TypeSystem",
    "PythonTypeSystem",
    "get_type_system",
    "set_type_system",
    "full_name",
    # Resolvers
    "lazy_get_type",
    "lazy_get_method",
    "get_method",
    "lazy_get_property",
    "lazy_get_field",
    "lazy_get_constructor",
    # Operations
    "create_instance",
    "invoke",
    "invoke_static",
    "invoke_static_by_name",
    "get_value",
    "set_value",
    # Configuration
    "ReflectionSettings",
    "configure",
    "get_settings",
]
