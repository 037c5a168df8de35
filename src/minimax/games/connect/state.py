# src/minimax/games/connect/state.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from minimax.config import COLS, CONNECT_N, ROWS, WIN_SCORE
from minimax.errors import InvalidStateError
from minimax.games.connect.rules import Cell, is_full, other, winner
from minimax.games.connect.zobrist import piece_key, side_key
from minimax.types import Player

Row = Tuple[Cell, ...]


@dataclass(frozen=True, slots=True)
class ConnectState:
    """
    Immutable connect-N position with gravity.

    ``perspective`` is the player whose utility the engine maximizes; it takes
    part in equality so cached scores never leak between the two sides.
    """
    grid: Tuple[Row, ...]
    to_play: Player = "X"
    perspective: Player = "X"
    connect_n: int = CONNECT_N
    zhash: int = field(default=0, compare=False, repr=False)

    @classmethod
    def initial(
        cls,
        rows: int = ROWS,
        cols: int = COLS,
        connect_n: int = CONNECT_N,
        to_play: Player = "X",
        perspective: Optional[Player] = None,
    ) -> "ConnectState":
        if connect_n > max(rows, cols):
            raise ValueError("connect_n does not fit on the board.")
        grid = tuple(tuple(None for _ in range(cols)) for _ in range(rows))
        return cls(grid, to_play, perspective or to_play, connect_n)

    @classmethod
    def from_rows(
        cls,
        rows: List[str],
        to_play: Player = "X",
        perspective: Optional[Player] = None,
        connect_n: int = CONNECT_N,
    ) -> "ConnectState":
        """Build a position from strings like ``"..X.O.."`` (top row first)."""
        grid = tuple(tuple(ch if ch in ("X", "O") else None for ch in line) for line in rows)
        return cls(grid, to_play, perspective or to_play, connect_n)

    def __post_init__(self) -> None:
        if not self.zhash:
            object.__setattr__(self, "zhash", self._compute_zhash())

    def _compute_zhash(self) -> int:
        h = 0
        for r, row in enumerate(self.grid):
            for c, p in enumerate(row):
                if p is not None:
                    h ^= piece_key(self.rows, self.cols, r, c, p)
        return h

    def __hash__(self) -> int:
        return hash((self.zhash ^ side_key(self.to_play), self.perspective, self.connect_n))

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0])

    def valid_moves(self) -> List[int]:
        return [c for c in range(self.cols) if self.grid[0][c] is None]

    def actions(self) -> List["Drop"]:
        if self.terminal_test():
            return []
        return [Drop(c) for c in self.valid_moves()]

    def winner(self) -> Optional[Player]:
        return winner(self.grid, self.connect_n)

    def terminal_test(self) -> bool:
        return self.winner() is not None or is_full(self.grid)

    def utility(self) -> float:
        w = self.winner()
        if w is None and not is_full(self.grid):
            raise InvalidStateError("utility() is only defined for finished games.")
        if w is None:
            return 0.0
        return WIN_SCORE if w == self.perspective else -WIN_SCORE

    def viewed_by(self, player: Player) -> "ConnectState":
        return ConnectState(self.grid, self.to_play, player, self.connect_n, self.zhash)

    def drop(self, col: int) -> "ConnectState":
        if col < 0 or col >= self.cols:
            raise ValueError("Column out of range.")
        if self.grid[0][col] is not None:
            raise ValueError("Column is full.")

        r = max(r for r in range(self.rows) if self.grid[r][col] is None)
        row = self.grid[r]
        new_row = row[:col] + (self.to_play,) + row[col + 1:]
        grid = self.grid[:r] + (new_row,) + self.grid[r + 1:]
        # XOR in the new piece
        zhash = self.zhash ^ piece_key(self.rows, self.cols, r, col, self.to_play)
        return ConnectState(grid, other(self.to_play), self.perspective, self.connect_n, zhash)

    def render(self) -> str:
        lines = [" " + " ".join(str(i + 1) for i in range(self.cols))]
        for row in self.grid:
            lines.append("|" + " ".join(p or "." for p in row) + "|")
        return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class Drop:
    col: int

    def apply(self, state: ConnectState) -> ConnectState:
        return state.drop(self.col)
