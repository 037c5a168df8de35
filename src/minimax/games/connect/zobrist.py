from __future__ import annotations
from functools import lru_cache
import random
from typing import Dict, Tuple

from minimax.types import Player


@lru_cache(maxsize=None)
def _keys(rows: int, cols: int) -> Dict[Tuple[int, int, Player], int]:
    # Deterministic for reproducibility; one table per board size
    rng = random.Random(1337 + rows * 97 + cols)
    keys: Dict[Tuple[int, int, Player], int] = {}
    for r in range(rows):
        for c in range(cols):
            keys[(r, c, "X")] = rng.getrandbits(64)
            keys[(r, c, "O")] = rng.getrandbits(64)
    return keys


SIDE_TO_MOVE_O: int = random.Random(7331).getrandbits(64)


def piece_key(rows: int, cols: int, r: int, c: int, p: Player) -> int:
    return _keys(rows, cols)[(r, c, p)]


def side_key(to_play: Player) -> int:
    return SIDE_TO_MOVE_O if to_play == "O" else 0
