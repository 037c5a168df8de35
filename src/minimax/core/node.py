from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional

from minimax.errors import InvalidStateError, UnevaluatedNodeError
from minimax.types import A, S


@dataclass(slots=True, eq=False)
class Node(Generic[S, A]):
    state: S
    # action such that action.apply(parent.state) == state; None at the root
    action: Optional[A] = None
    depth: int = 0
    _value: Optional[float] = None

    @property
    def evaluated(self) -> bool:
        return self._value is not None

    @property
    def value(self) -> float:
        if self._value is None:
            raise UnevaluatedNodeError(f"Node at depth {self.depth} has not been evaluated.")
        return self._value

    def resolve(self, compute: Callable[["Node[S, A]"], float]) -> float:
        """
        Return the node's value, computing and storing it on first use.
        """
        if self._value is None:
            self._value = float(compute(self))
        return self._value

    def successors(self) -> List["Node[S, A]"]:
        # Regenerated on every call; order follows state.actions()
        return [self.child(a) for a in self.state.actions()]

    def child(self, action: A) -> "Node[S, A]":
        return Node(action.apply(self.state), action, self.depth + 1)

    def terminal_test(self) -> bool:
        return self.state.terminal_test()

    def utility(self) -> float:
        if not self.state.terminal_test():
            raise InvalidStateError(f"utility() requested for non-terminal state {self.state!r}")
        return float(self.state.utility())

    @property
    def maximizing(self) -> bool:
        # Root player maximizes; plies alternate from there
        return self.depth % 2 == 0
