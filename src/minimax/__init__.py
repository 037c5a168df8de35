from .core.cutoff import Deadline, DepthLimit, NeverCutoff, any_of
from .core.heuristic import CountingHeuristic
from .core.node import Node
from .core.transpositions import NoTranspositions, TranspositionTable, Transpositions
from .core.tree import Decision, DecisionTree, SearchStats, decide
from .errors import InvalidStateError, MinimaxError, UnevaluatedNodeError

__all__ = [
    "Deadline",
    "DepthLimit",
    "NeverCutoff",
    "any_of",
    "CountingHeuristic",
    "Node",
    "NoTranspositions",
    "TranspositionTable",
    "Transpositions",
    "Decision",
    "DecisionTree",
    "SearchStats",
    "decide",
    "InvalidStateError",
    "MinimaxError",
    "UnevaluatedNodeError",
]
