"""Process-wide default host."""

from __future__ import annotations

from lazyreflect.core.errors import NullInputError
from lazyreflect.host.protocol import TypeSystem
from lazyreflect.host.python import PythonTypeSystem

# Module-level host instance
_host: TypeSystem = PythonTypeSystem()


def get_type_system() -> TypeSystem:
    """Access the default host used when no `host=` is passed.

    Returns:
        The process-wide TypeSystem instance.
    """
    return _host


def set_type_system(host: TypeSystem) -> TypeSystem:
    """Install a new default host.

    Args:
        host: TypeSystem implementation to use from now on.

    Returns:
        The previously installed host, so callers can restore it.

    Raises:
        NullInputError: If host is None.
    """
    global _host
    if host is None:
        raise NullInputError("host")
    previous = _host
    _host = host
    return previous
