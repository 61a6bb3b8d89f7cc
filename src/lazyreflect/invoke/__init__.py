"""Instance factory, invoker and value accessor."""

from lazyreflect.invoke.operations import (
    create_instance,
    get_value,
    invoke,
    invoke_static,
    invoke_static_by_name,
    set_value,
)

__all__ = [
    "create_instance",
    "invoke",
    "invoke_static",
    "invoke_static_by_name",
    "get_value",
    "set_value",
]
