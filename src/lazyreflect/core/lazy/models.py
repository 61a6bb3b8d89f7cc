"""Lazy cell models."""

from enum import Enum, auto


class CellState(Enum):
    """Evaluation state of a Lazy cell.

    Moves UNEVALUATED -> EVALUATING -> SUCCESS or FAILURE, exactly once.
    """

    UNEVALUATED = auto()
    EVALUATING = auto()
    SUCCESS = auto()
    FAILURE = auto()
