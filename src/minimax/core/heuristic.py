from __future__ import annotations
from collections import Counter
from typing import Callable, Hashable

HeuristicEvaluationFunction = Callable[[Hashable], float]


class CountingHeuristic:
    """
    Wraps a heuristic and records every state it is asked to score.
    Handy for checking that the transposition cache does its job.
    """

    def __init__(self, fn: HeuristicEvaluationFunction) -> None:
        self.fn = fn
        self._seen: Counter = Counter()

    def __call__(self, state) -> float:
        self._seen[state] += 1
        return float(self.fn(state))

    @property
    def calls(self) -> int:
        return sum(self._seen.values())

    def count(self, state) -> int:
        return self._seen[state]

    def counts(self) -> dict:
        return dict(self._seen)
