"""Tests for the stock cutoff tests."""

import pytest

from conftest import FakeState
from minimax import Deadline, DepthLimit, NeverCutoff, Node, any_of


def _node(depth: int) -> Node:
    return Node(FakeState.leaf("s", 0), depth=depth)


def test_depth_limit() -> None:
    limit = DepthLimit(3)
    assert not limit(_node(2))
    assert limit(_node(3))
    assert limit(_node(4))


def test_depth_limit_must_be_positive() -> None:
    with pytest.raises(ValueError):
        DepthLimit(0)


def test_deadline_uses_clock() -> None:
    now = [100.0]
    deadline = Deadline(0.5, clock=lambda: now[0])

    assert not deadline(_node(1))
    now[0] = 100.49
    assert not deadline(_node(1))
    now[0] = 100.5
    assert deadline(_node(1))

    deadline.restart()
    assert not deadline(_node(1))


def test_never_cutoff() -> None:
    assert not NeverCutoff()(_node(50))


def test_any_of() -> None:
    now = [0.0]
    combined = any_of(DepthLimit(2), Deadline(1.0, clock=lambda: now[0]))

    assert not combined(_node(1))
    assert combined(_node(2))
    now[0] = 5.0
    assert combined(_node(1))


def test_any_of_needs_tests() -> None:
    with pytest.raises(ValueError):
        any_of()
