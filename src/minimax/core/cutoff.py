from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable
import time

from minimax.core.node import Node

CutoffTest = Callable[[Node], bool]


@dataclass(frozen=True, slots=True)
class DepthLimit:
    max_depth: int

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1.")

    def __call__(self, node: Node) -> bool:
        return node.depth >= self.max_depth


@dataclass(slots=True)
class Deadline:
    """
    Wall-clock budget. The clock starts when the object is created (or on
    restart()), so build a fresh one per search.
    """
    seconds: float
    clock: Callable[[], float] = time.perf_counter
    started: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        self.restart()

    def restart(self) -> None:
        self.started = self.clock()

    def __call__(self, node: Node) -> bool:
        return self.clock() - self.started >= self.seconds


class NeverCutoff:
    def __call__(self, node: Node) -> bool:
        return False


def any_of(*tests: CutoffTest) -> CutoffTest:
    if not tests:
        raise ValueError("any_of() needs at least one cutoff test.")

    def _combined(node: Node) -> bool:
        return any(t(node) for t in tests)

    return _combined
