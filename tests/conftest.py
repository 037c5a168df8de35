"""Shared fixtures: hand-built game trees for exercising the engine."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Sequence

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from minimax.errors import InvalidStateError


@dataclass(frozen=True)
class FakeAction:
    target: "FakeState"

    def apply(self, state: "FakeState") -> "FakeState":
        return self.target


@dataclass(frozen=True)
class FakeState:
    """
    A node of an explicit game tree. States compare equal by name, so two
    objects with the same name are the same position.
    """
    name: str
    children: tuple = field(default=(), compare=False)
    terminal: bool = field(default=False, compare=False)
    value: float = field(default=0.0, compare=False)
    heuristic_value: float = field(default=0.0, compare=False)

    @classmethod
    def leaf(cls, name: str, utility: float) -> "FakeState":
        return cls(name, terminal=True, value=utility)

    @classmethod
    def inner(cls, name: str, children: Sequence["FakeState"], heuristic: float = 0.0) -> "FakeState":
        return cls(name, children=tuple(children), heuristic_value=heuristic)

    def actions(self) -> list[FakeAction]:
        return [FakeAction(c) for c in self.children]

    def terminal_test(self) -> bool:
        return self.terminal

    def utility(self) -> float:
        if not self.terminal:
            raise InvalidStateError(f"{self.name} is not terminal")
        return self.value


def fake_heuristic(state: FakeState) -> float:
    return state.heuristic_value


def never(node) -> bool:
    return False


@pytest.fixture
def textbook_tree() -> dict[str, FakeState]:
    """
    The classic two-ply example:

        A -> B (3, 12, 8), C (2, 4, 6), D (14, 5, 2)

    Min values are 3, 2, 2 so the root picks B with value 3.
    """
    leaves = {
        name: FakeState.leaf(name, v)
        for name, v in [
            ("b1", 3), ("b2", 12), ("b3", 8),
            ("c1", 2), ("c2", 4), ("c3", 6),
            ("d1", 14), ("d2", 5), ("d3", 2),
        ]
    }
    B = FakeState.inner("B", [leaves["b1"], leaves["b2"], leaves["b3"]])
    C = FakeState.inner("C", [leaves["c1"], leaves["c2"], leaves["c3"]])
    D = FakeState.inner("D", [leaves["d1"], leaves["d2"], leaves["d3"]])
    A = FakeState.inner("A", [B, C, D])
    return {"A": A, "B": B, "C": C, "D": D, **leaves}


@pytest.fixture
def transposing_tree() -> dict[str, FakeState]:
    """
    A -> B -> s1, s2, s3
      -> C -> s1, s2, s3, s4

    s1..s4 are non-terminal with heuristic values 4..7; a depth-2 cutoff
    scores them without expansion. Every s_i below B is reached again below C.
    """
    sink = FakeState.leaf("sink", 0.0)
    s = {f"s{i}": FakeState.inner(f"s{i}", [sink], heuristic=3.0 + i) for i in range(1, 5)}
    B = FakeState.inner("B", [s["s1"], s["s2"], s["s3"]])
    C = FakeState.inner("C", [s["s1"], s["s2"], s["s3"], s["s4"]])
    A = FakeState.inner("A", [B, C])
    return {"A": A, "B": B, "C": C, "sink": sink, **s}
