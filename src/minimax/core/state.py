from __future__ import annotations
from typing import Iterable, Protocol, TypeVar, runtime_checkable

S_co = TypeVar("S_co", covariant=True)


@runtime_checkable
class Action(Protocol[S_co]):
    def apply(self, state) -> S_co:
        ...


@runtime_checkable
class State(Protocol):
    """
    A game position as the engine sees it.

    Equality and hashing must follow position equivalence: the transposition
    cache is keyed by the state itself. The engine never mutates a state.
    """

    def __hash__(self) -> int:
        ...

    def actions(self) -> Iterable[Action]:
        ...

    def terminal_test(self) -> bool:
        ...

    def utility(self) -> float:
        """Exact value of a terminal state; raises InvalidStateError otherwise."""
        ...
