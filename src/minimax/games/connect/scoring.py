from __future__ import annotations
from typing import Callable, List

from minimax.games.connect.rules import Coord, other, windows
from minimax.games.connect.state import ConnectState
from minimax.types import Player


def _is_playable_empty(state: ConnectState, r: int, c: int) -> bool:
    """
    An empty cell is playable if it is on the bottom row or sits on a piece.
    """
    if state.grid[r][c] is not None:
        return False
    return r == state.rows - 1 or state.grid[r + 1][c] is not None


def _score_window(state: ConnectState, coords: List[Coord], player: Player) -> int:
    n = len(coords)
    opp = other(player)
    cells = [state.grid[r][c] for (r, c) in coords]

    p_count = cells.count(player)
    o_count = cells.count(opp)

    # mixed window: neither side can complete it
    if p_count > 0 and o_count > 0:
        return 0

    empties = [pos for pos, v in zip(coords, cells) if v is None]
    playable = sum(1 for r, c in empties if _is_playable_empty(state, r, c))

    if p_count == n - 1:
        # completing square reachable right now is worth far more
        return 250 if playable == 1 else 40
    if o_count == n - 1:
        return -280 if playable == 1 else -50
    if n > 2 and p_count == n - 2:
        return 18
    if n > 2 and o_count == n - 2:
        return -20
    if n > 3 and p_count == 1:
        return 2
    return 0


def window_score(state: ConnectState, player: Player) -> float:
    """
    Static estimate of ``state`` for ``player``: open lines weighted by how
    close they are to completion, plus a centre-column bonus.
    """
    score = 0

    center = state.cols // 2
    for r in range(state.rows):
        cell = state.grid[r][center]
        if cell == player:
            score += 6
        elif cell is not None:
            score -= 6

    for coords in windows(state.rows, state.cols, state.connect_n):
        score += _score_window(state, coords, player)

    return float(score)


def evaluate(state: ConnectState) -> float:
    """Heuristic from the state's own perspective."""
    return window_score(state, state.perspective)


def heuristic_for(player: Player) -> Callable[[ConnectState], float]:
    def _h(state: ConnectState) -> float:
        return window_score(state, player)

    return _h
