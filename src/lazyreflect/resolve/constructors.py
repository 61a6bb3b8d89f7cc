"""Constructor overload selection.

Candidates come from the host in declaration order. A candidate matches when
the arguments bind to its signature and every annotated parameter accepts
its argument. Exact runtime-type matches score 2 per argument, other
assignable matches 1; the highest score wins and the earliest declaration
breaks ties.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Sequence
from typing import Any

from lazyreflect.core.coercion import exact_match, is_assignable
from lazyreflect.core.errors import MemberNotFoundError, NullInputError, TypeMismatchError
from lazyreflect.core.handles import ConstructorHandle
from lazyreflect.core.lazy import Lazy
from lazyreflect.host import TypeSystem, get_type_system
from lazyreflect.resolve.resolvers import TypeSource, resolve_owner

logger = logging.getLogger(__name__)


def _score(signature: inspect.Signature | None, args: Sequence[Any]) -> int | None:
    """Score how well args fit signature. None means they don't fit."""
    if signature is None:
        return 0
    try:
        bound = signature.bind(*args)
    except TypeError:
        return None

    score = 0
    for name, value in bound.arguments.items():
        param = signature.parameters[name]
        annotation = param.annotation
        if param.kind is param.VAR_POSITIONAL:
            values = value
        elif param.kind is param.VAR_KEYWORD:
            values = value.values()
        else:
            values = (value,)
        for item in values:
            if annotation is param.empty or isinstance(annotation, str):
                score += 1
                continue
            try:
                if not is_assignable(item, annotation):
                    return None
            except TypeMismatchError:
                # Annotation not checkable at runtime
                score += 1
                continue
            score += 2 if exact_match(item, annotation) else 1
    return score


def select_constructor(
    owner: type, args: Sequence[Any] = (), *, host: TypeSystem | None = None
) -> ConstructorHandle:
    """Pick the constructor of owner that best fits args.

    Args:
        owner: Class to construct.
        args: Positional constructor arguments.
        host: Type system listing the candidates.

    Returns:
        The winning constructor handle.

    Raises:
        MemberNotFoundError: If no candidate accepts args.
    """
    system = host or get_type_system()
    best: ConstructorHandle | None = None
    best_score = -1
    for candidate in system.find_constructors(owner):
        score = _score(candidate.signature, args)
        if score is not None and score > best_score:
            best, best_score = candidate, score

    if best is None:
        arg_types = ", ".join(type(arg).__name__ for arg in args)
        raise MemberNotFoundError(
            owner, "__init__", detail=f"no constructor accepts ({arg_types})"
        )
    logger.debug("Selected constructor %s for %d argument(s)", best, len(args))
    return best


def lazy_get_constructor(
    type_cell: TypeSource, args: Sequence[Any] = (), *, host: TypeSystem | None = None
) -> Lazy[ConstructorHandle]:
    """Build a cell selecting the constructor of a type for args.

    Raises:
        NullInputError: Immediately, if type_cell is None.
        MemberNotFoundError: On evaluation, if no constructor accepts args.
    """
    if type_cell is None:
        raise NullInputError("type_cell")
    frozen_args = tuple(args)
    return Lazy(lambda: select_constructor(resolve_owner(type_cell), frozen_args, host=host))
