"""Error taxonomy for reflective lookup and invocation.

Three kinds only:
    NullInputError       - an entry-point argument was None
    MemberNotFoundError  - a type or member does not exist under the binding filter
    TypeMismatchError    - a value or receiver is not compatible with the requested type

Each also derives from the closest builtin so callers can catch either.
"""

from __future__ import annotations

from typing import Any


class ReflectionError(Exception):
    """Base class for all lazyreflect errors."""

    pass


class NullInputError(ReflectionError, ValueError):
    """Raised immediately when a required cell, handle or module is None."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Argument '{argument}' must not be None")


class MemberNotFoundError(ReflectionError, LookupError):
    """Raised when a type or member cannot be found.

    Attributes:
        owner: Module or type the lookup ran against.
        member: Name that was looked up.
        binding: Binding filter in effect, if any.
    """

    def __init__(self, owner: Any, member: str, binding: Any = None, detail: str = "") -> None:
        self.owner = owner
        self.member = member
        self.binding = binding
        where = getattr(owner, "__qualname__", None) or getattr(owner, "__name__", repr(owner))
        message = f"'{member}' not found on {where}"
        if binding is not None:
            message += f" with binding {binding}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class TypeMismatchError(ReflectionError, TypeError):
    """Raised when a value cannot be coerced to the requested type."""

    def __init__(self, expected: Any, actual: Any, detail: str = "") -> None:
        self.expected = expected
        self.actual = actual
        message = f"Expected {_describe(expected)}, got {_describe(actual)}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


def _describe(tp: Any) -> str:
    if isinstance(tp, type):
        return tp.__qualname__
    return repr(tp)
