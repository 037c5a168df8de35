from __future__ import annotations

import argparse
import csv
import logging
import random
import time
from pathlib import Path
from typing import Dict, List, Tuple

from minimax.agent import MinimaxAgent
from minimax.config import AI_TIME_LIMIT_SEC, COLS, CONNECT_N, MINIMAX_DEPTH, RESULTS_DIR, ROWS
from minimax.games.connect.state import ConnectState

log = logging.getLogger(__name__)

FIELDS = [
    "game", "ply", "player", "move_col", "eval",
    "depth", "nodes", "terminals", "cutoffs", "evaluations", "tt_hits",
    "tt_entries", "max_depth", "time_ms",
]


def play_headless(
    agent_x: MinimaxAgent,
    agent_o: MinimaxAgent,
    state: ConnectState,
    game_no: int = 0,
    opening_plies: int = 0,
    seed: int = 0,
) -> Tuple[str, List[Dict[str, object]]]:
    """
    Play one game without any UI.
    Returns the outcome ("X", "O" or "D") and one stats row per engine move.
    """
    rows: List[Dict[str, object]] = []

    # random opening so repeated games differ
    rng = random.Random(seed)
    for _ in range(opening_plies):
        if state.terminal_test():
            break
        state = state.drop(rng.choice(state.valid_moves()))

    ply = 0
    while not state.terminal_test():
        agent = agent_x if state.to_play == "X" else agent_o
        col = agent.choose_move(state)

        info = agent.last_info
        rows.append({
            "game": game_no,
            "ply": ply,
            "player": state.to_play,
            "depth": agent.depth,
            **{k: info.get(k) for k in FIELDS if k in info},
        })

        state = state.drop(col)
        ply += 1

    log.debug("game %d final position:\n%s", game_no, state.render())
    return state.winner() or "D", rows


def write_csv(path: Path, rows: List[Dict[str, object]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for row in rows:
            w.writerow({k: row.get(k) for k in FIELDS})


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Minimax self-play on the connect-N demo game.")
    ap.add_argument("--games", type=int, default=2, help="Number of games to play")
    ap.add_argument("--depth", type=int, default=MINIMAX_DEPTH, help="Search depth for both sides")
    ap.add_argument("--depth-o", type=int, default=None, help="Search depth for O (defaults to --depth)")
    ap.add_argument("--time-limit", type=float, default=AI_TIME_LIMIT_SEC, help="Seconds per move (0 = no limit)")
    ap.add_argument("--rows", type=int, default=ROWS)
    ap.add_argument("--cols", type=int, default=COLS)
    ap.add_argument("--connect", type=int, default=CONNECT_N, help="Pieces in a row needed to win")
    ap.add_argument("--opening", type=int, default=2, help="Random opening plies per game")
    ap.add_argument("--seed", type=int, default=1234)
    ap.add_argument("--shared-cache", action="store_true", help="Keep each side's transposition table between moves")
    ap.add_argument("--out", type=str, default=None, help="CSV path (default: data/results/selfplay_<timestamp>.csv)")
    ap.add_argument("--verbose", action="store_true", help="Log every search decision")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    start_state = ConnectState.initial(args.rows, args.cols, args.connect)

    wins = {"X": 0, "O": 0, "D": 0}
    all_rows: List[Dict[str, object]] = []

    for g in range(args.games):
        ax = MinimaxAgent(name="Minimax X", depth=args.depth,
                          time_limit_sec=args.time_limit, shared_cache=args.shared_cache)
        ao = MinimaxAgent(name="Minimax O", depth=args.depth_o or args.depth,
                          time_limit_sec=args.time_limit, shared_cache=args.shared_cache)

        outcome, rows = play_headless(ax, ao, start_state, game_no=g,
                                      opening_plies=args.opening, seed=args.seed + g)
        wins[outcome] += 1
        all_rows.extend(rows)
        print(f"Game {g + 1}/{args.games} complete: {'draw' if outcome == 'D' else outcome + ' wins'} "
              f"({len(rows)} engine moves)")

    print("\n=== SELF-PLAY RESULTS ===")
    print(f"X wins:    {wins['X']}")
    print(f"O wins:    {wins['O']}")
    print(f"Draws:     {wins['D']}")

    if all_rows:
        n = len(all_rows)
        print(f"avg nodes/move:       {sum(int(r['nodes']) for r in all_rows) / n:.1f}")
        print(f"avg evaluations/move: {sum(int(r['evaluations']) for r in all_rows) / n:.1f}")
        print(f"avg ms/move:          {sum(int(r['time_ms']) for r in all_rows) / n:.1f}")

    if args.out:
        out_path = Path(args.out)
    else:
        ts = time.strftime("%Y%m%d_%H%M%S")
        out_path = Path(RESULTS_DIR) / f"selfplay_{ts}.csv"

    write_csv(out_path, all_rows)
    print(f"\nWrote CSV: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
