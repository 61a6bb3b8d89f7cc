"""Host type systems answering lookups and dispatching calls."""

from lazyreflect.host.default import get_type_system, set_type_system
from lazyreflect.host.protocol import TypeSystem
from lazyreflect.host.python import PythonTypeSystem, full_name, is_public_name

__all__ = [
    "TypeSystem",
    "PythonTypeSystem",
    "get_type_system",
    "set_type_system",
    "full_name",
    "is_public_name",
]
