from __future__ import annotations

from dataclasses import asdict, dataclass, field
from math import inf
import logging
import time
from typing import Generic, Optional

from minimax.core.cutoff import CutoffTest
from minimax.core.heuristic import HeuristicEvaluationFunction
from minimax.core.node import Node
from minimax.core.transpositions import TranspositionTable, Transpositions
from minimax.errors import InvalidStateError
from minimax.types import A, S

log = logging.getLogger(__name__)


@dataclass(slots=True)
class SearchStats:
    nodes: int = 0
    terminals: int = 0
    cutoffs: int = 0
    evaluations: int = 0
    tt_hits: int = 0
    max_depth: int = 0
    time_ms: int = 0

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class Decision(Generic[S, A]):
    successor: Node[S, A]
    value: float
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def action(self) -> A:
        return self.successor.action

    @property
    def state(self) -> S:
        return self.successor.state


class DecisionTree(Generic[S, A]):
    """
    Full-width minimax over a caller-defined game.

    The root belongs to the maximizing player. Each root successor is valued
    as a min node, and the successor with the highest value is the decision.
    Nodes are scored by exact utility when terminal, by the (cached) heuristic
    when the cutoff test fires, and by max/min over their successors otherwise.
    Nothing is pruned, so every successor of an expanded node is visited.
    """

    def __init__(
        self,
        root: S,
        transpositions: Transpositions,
        heuristic: HeuristicEvaluationFunction,
        cutoff_test: CutoffTest,
    ) -> None:
        self.root = Node(root)
        self.transpositions = transpositions
        self.heuristic = heuristic
        self.cutoff_test = cutoff_test
        self.stats = SearchStats()

    def perform(self) -> Decision[S, A]:
        self.stats = SearchStats()
        start = time.perf_counter()

        if self.root.terminal_test():
            raise InvalidStateError(f"Cannot choose a move from terminal state {self.root.state!r}")

        best: Optional[Node[S, A]] = None
        best_value = -inf

        for succ in self.root.successors():
            v = succ.resolve(self._min_value)
            # strict improvement only: ties keep the earliest successor
            if best is None or v > best_value:
                best, best_value = succ, v

        if best is None:
            raise InvalidStateError(f"Non-terminal root state {self.root.state!r} has no actions")

        self.stats.time_ms = max(1, int((time.perf_counter() - start) * 1000))
        log.debug(
            "minimax decision: action=%r value=%s %s",
            best.action, best_value, self.stats.as_dict(),
        )
        return Decision(successor=best, value=best_value, stats=self.stats)

    def _leaf_value(self, node: Node[S, A]) -> Optional[float]:
        """
        Value of a node that is not expanded, or None if it must be expanded.
        """
        self.stats.nodes += 1
        self.stats.max_depth = max(self.stats.max_depth, node.depth)

        if node.terminal_test():
            self.stats.terminals += 1
            return node.utility()

        if self.cutoff_test(node):
            self.stats.cutoffs += 1
            return self._heuristic_value(node.state)

        return None

    def _heuristic_value(self, state: S) -> float:
        cached = self.transpositions.get(state)
        if cached is not None:
            self.stats.tt_hits += 1
            return cached

        v = float(self.heuristic(state))
        self.stats.evaluations += 1
        self.transpositions.put(state, v)
        return v

    def _expand(self, node: Node[S, A]) -> list[Node[S, A]]:
        successors = node.successors()
        if not successors:
            raise InvalidStateError(f"Non-terminal state {node.state!r} has no actions")
        return successors

    def _max_value(self, node: Node[S, A]) -> float:
        leaf = self._leaf_value(node)
        if leaf is not None:
            return leaf

        v = -inf
        for succ in self._expand(node):
            v = max(v, succ.resolve(self._min_value))
        return v

    def _min_value(self, node: Node[S, A]) -> float:
        leaf = self._leaf_value(node)
        if leaf is not None:
            return leaf

        v = inf
        for succ in self._expand(node):
            v = min(v, succ.resolve(self._max_value))
        return v


def decide(
    state: S,
    heuristic: HeuristicEvaluationFunction,
    cutoff_test: CutoffTest,
    transpositions: Optional[Transpositions] = None,
) -> Decision[S, A]:
    """Run one search; a fresh TranspositionTable is used unless one is given."""
    if transpositions is None:
        transpositions = TranspositionTable()
    return DecisionTree(state, transpositions, heuristic, cutoff_test).perform()
