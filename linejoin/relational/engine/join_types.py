"""
Enumerations for the line-join evaluation strategies.
"""
from enum import Enum

class LineJoinStrategy(str, Enum):
    """
    Available strategies for evaluating a line (path) join.

    REDUCTION runs the two semi-join sweeps before joining, CHAINING folds
    pairwise natural joins left to right with no pruning.
    """
    REDUCTION = "reduction"
    CHAINING = "chaining"

    @classmethod
    def get_all_strategies(cls) -> list[str]:
        """Return a list of all available strategy names."""
        return [strategy.value for strategy in cls]

    @classmethod
    def is_valid(cls, strategy: str) -> bool:
        """Check if a strategy name is valid."""
        return strategy in [s.value for s in cls]
