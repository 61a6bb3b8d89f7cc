"""Deferred resolution cells."""

from lazyreflect.core.lazy.core import Lazy, unwrap, value_of
from lazyreflect.core.lazy.models import CellState

__all__ = [
    "Lazy",
    "CellState",
    "value_of",
    "unwrap",
]
