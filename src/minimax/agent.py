from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from minimax.config import AI_TIME_LIMIT_SEC, MINIMAX_DEPTH, TT_MAX_ENTRIES
from minimax.core.cutoff import CutoffTest, Deadline, DepthLimit, any_of
from minimax.core.heuristic import CountingHeuristic
from minimax.core.transpositions import TranspositionTable
from minimax.core.tree import Decision, DecisionTree
from minimax.games.connect.scoring import evaluate
from minimax.games.connect.state import ConnectState


@dataclass(slots=True)
class MinimaxAgent:
    """
    Plays the connect-N demo game with the minimax engine.

    With ``shared_cache`` the transposition table survives between moves, so
    heuristic scores computed on one turn are reused on the next.
    """
    name: str = "Minimax AI"
    depth: int = MINIMAX_DEPTH
    time_limit_sec: float = AI_TIME_LIMIT_SEC
    shared_cache: bool = False
    heuristic: Callable[[ConnectState], float] = evaluate
    tt: TranspositionTable = field(default_factory=lambda: TranspositionTable(TT_MAX_ENTRIES))

    # Stats
    last_info: dict = field(default_factory=dict)
    last_decision: Optional[Decision] = None

    def _cutoff(self) -> CutoffTest:
        limit = DepthLimit(self.depth)
        if self.time_limit_sec > 0:
            return any_of(limit, Deadline(self.time_limit_sec))
        return limit

    def choose_move(self, state: ConnectState) -> int:
        if not state.valid_moves():
            raise ValueError("No valid moves.")

        if not self.shared_cache:
            self.tt = TranspositionTable(TT_MAX_ENTRIES)

        root = state.viewed_by(state.to_play)
        fn = CountingHeuristic(self.heuristic)
        decision = DecisionTree(root, self.tt, fn, self._cutoff()).perform()

        self.last_decision = decision
        self.last_info = {
            **decision.stats.as_dict(),
            "move_col": decision.action.col + 1,
            "eval": decision.value,
            "tt_entries": len(self.tt),
        }
        return decision.action.col
