from __future__ import annotations
from typing import Iterator, List, Optional, Sequence, Tuple

from minimax.types import Player

Coord = Tuple[int, int]  # (row, col)
Cell = Optional[Player]
Grid = Sequence[Sequence[Cell]]


def other(p: Player) -> Player:
    return "O" if p == "X" else "X"


def windows(rows: int, cols: int, n: int) -> Iterator[List[Coord]]:
    """Every straight line of n cells on the board."""
    # Horizontal
    for r in range(rows):
        for c in range(cols - n + 1):
            yield [(r, c + i) for i in range(n)]

    # Vertical
    for r in range(rows - n + 1):
        for c in range(cols):
            yield [(r + i, c) for i in range(n)]

    # Diagonal down-right
    for r in range(rows - n + 1):
        for c in range(cols - n + 1):
            yield [(r + i, c + i) for i in range(n)]

    # Diagonal up-right
    for r in range(n - 1, rows):
        for c in range(cols - n + 1):
            yield [(r - i, c + i) for i in range(n)]


def winner_with_line(grid: Grid, n: int) -> Optional[Tuple[Player, List[Coord]]]:
    rows, cols = len(grid), len(grid[0])
    for line in windows(rows, cols, n):
        r0, c0 = line[0]
        p = grid[r0][c0]
        if p and all(grid[r][c] == p for r, c in line[1:]):
            return p, line
    return None


def winner(grid: Grid, n: int) -> Optional[Player]:
    res = winner_with_line(grid, n)
    return res[0] if res else None


def is_full(grid: Grid) -> bool:
    return all(cell is not None for cell in grid[0])
