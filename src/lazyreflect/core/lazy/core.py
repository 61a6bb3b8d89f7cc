"""Deferred resolution cell: evaluate once, cache the value or the failure.

Usage:
    cell = Lazy(lambda: importlib.import_module("json"))
    cell.is_value_created   # False
    cell.value              # imports json
    cell.value              # cached

    broken = Lazy(lambda: 1 / 0)
    broken.value            # ZeroDivisionError
    broken.value            # same ZeroDivisionError, resolver not re-run
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from types import TracebackType
from typing import Any

from lazyreflect.config import get_settings
from lazyreflect.core.errors import NullInputError
from lazyreflect.core.lazy.models import CellState

logger = logging.getLogger(__name__)


class Lazy[T]:
    """Single-assignment, lazily evaluated container for a value or its failure.

    The resolver runs at most once. Whatever it produces, a value or a raised
    exception, is replayed on every later access. With thread safety enabled,
    concurrent first accesses block on a lock so the resolver still runs once
    and every caller observes the same outcome.

    Args:
        resolve: Zero-argument callable producing the value.
        thread_safe: Lock around first evaluation. Defaults to
            ReflectionSettings.thread_safe.

    Raises:
        NullInputError: If resolve is None.
        TypeError: If resolve is not callable.
    """

    __slots__ = ("_resolve", "_state", "_value", "_error", "_traceback", "_lock", "_evaluating_thread")

    def __init__(self, resolve: Callable[[], T], *, thread_safe: bool | None = None) -> None:
        if resolve is None:
            raise NullInputError("resolve")
        if not callable(resolve):
            raise TypeError(f"Lazy resolver must be callable, got {type(resolve).__name__}")
        if thread_safe is None:
            thread_safe = get_settings().thread_safe

        self._resolve: Callable[[], T] | None = resolve
        self._state = CellState.UNEVALUATED
        self._value: T | None = None
        self._error: BaseException | None = None
        self._traceback: TracebackType | None = None
        self._lock: threading.Lock | None = threading.Lock() if thread_safe else None
        self._evaluating_thread: int | None = None

    @classmethod
    def of(cls, value: T) -> Lazy[T]:
        """Create a cell that is already evaluated to value."""
        cell: Lazy[T] = cls(_unreachable, thread_safe=False)
        cell._resolve = None
        cell._value = value
        cell._state = CellState.SUCCESS
        return cell

    @property
    def state(self) -> CellState:
        """Current evaluation state. Never triggers evaluation."""
        return self._state

    @property
    def is_value_created(self) -> bool:
        """True once the resolver has run successfully."""
        return self._state is CellState.SUCCESS

    @property
    def value(self) -> T:
        """Evaluate on first access and replay the cached outcome afterwards.

        Returns:
            The resolved value.

        Raises:
            Exception: Whatever the resolver raised on first evaluation,
                re-raised identically on every access.
            RuntimeError: If the resolver reads its own cell. The resolver
                fails with it and the cell caches that failure.
        """
        if self._state is CellState.UNEVALUATED or self._state is CellState.EVALUATING:
            if self._evaluating_thread == threading.get_ident():
                raise RuntimeError("Lazy resolver re-entered its own cell")
            if self._lock is None:
                if self._state is CellState.UNEVALUATED:
                    self._evaluate()
            else:
                with self._lock:
                    # Another thread may have finished while we waited
                    if self._state is CellState.UNEVALUATED:
                        self._evaluate()

        if self._state is CellState.FAILURE:
            raise self._error.with_traceback(self._traceback)  # type: ignore[union-attr]
        return self._value  # type: ignore[return-value]

    def _evaluate(self) -> None:
        resolve = self._resolve
        self._evaluating_thread = threading.get_ident()
        self._state = CellState.EVALUATING
        try:
            value = resolve()  # type: ignore[misc]
        except Exception as exc:
            logger.debug("Lazy resolution failed: %r", exc)
            self._error = exc
            self._traceback = exc.__traceback__
            self._state = CellState.FAILURE
        else:
            self._value = value
            self._state = CellState.SUCCESS
        finally:
            self._evaluating_thread = None
        # Drop the closure so anything it captured can be collected
        self._resolve = None

    def __repr__(self) -> str:
        if self._state is CellState.SUCCESS:
            return f"Lazy({self._value!r})"
        if self._state is CellState.FAILURE:
            return f"Lazy(<failed: {type(self._error).__name__}>)"
        if self._state is CellState.EVALUATING:
            return "Lazy(<evaluating>)"
        return "Lazy(<unevaluated>)"


def _unreachable() -> Any:
    raise AssertionError("pre-evaluated Lazy must not resolve")


def value_of[T](cell: Lazy[T] | None) -> T:
    """Return the value of cell, rejecting a missing cell before any evaluation.

    Args:
        cell: Cell to force.

    Returns:
        The cell's resolved value.

    Raises:
        NullInputError: If cell is None.
    """
    if cell is None:
        raise NullInputError("cell")
    return cell.value


def unwrap(target: Any, argument: str) -> Any:
    """Resolve a "deferred or direct" argument to its concrete value.

    Args:
        target: A Lazy cell or a concrete value.
        argument: Argument name reported on failure.

    Returns:
        The cell's value, or target itself when it is not a cell.

    Raises:
        NullInputError: If target is None or a cell resolves to None.
    """
    if target is None:
        raise NullInputError(argument)
    if isinstance(target, Lazy):
        target = target.value
        if target is None:
            raise NullInputError(argument)
    return target
