"""Resolvers: build lazy cells for types, members and constructors."""

from lazyreflect.resolve.constructors import lazy_get_constructor, select_constructor
from lazyreflect.resolve.resolvers import (
    TypeSource,
    get_method,
    lazy_get_field,
    lazy_get_method,
    lazy_get_property,
    lazy_get_type,
    resolve_owner,
)

__all__ = [
    "TypeSource",
    "lazy_get_type",
    "lazy_get_method",
    "get_method",
    "lazy_get_property",
    "lazy_get_field",
    "lazy_get_constructor",
    "select_constructor",
    "resolve_owner",
]
