"""Tests for the self-play agent and script."""

import csv

from minimax.agent import MinimaxAgent
from minimax.games.connect import ConnectState
from minimax.scripts.selfplay import FIELDS, main, play_headless


def small() -> ConnectState:
    return ConnectState.initial(rows=4, cols=4, connect_n=3)


def test_agent_reports_search_info() -> None:
    agent = MinimaxAgent(depth=2)
    col = agent.choose_move(small())

    assert col in small().valid_moves()
    assert agent.last_info["move_col"] == col + 1
    assert agent.last_info["nodes"] > 0
    assert agent.last_decision is not None


def test_agent_plays_for_side_to_move() -> None:
    # O to move and must block X's bottom row
    s = ConnectState.from_rows(["....", "....", "....", "XX.."], to_play="O", perspective="X", connect_n=3)
    assert MinimaxAgent(depth=2).choose_move(s) == 2


def test_fresh_cache_per_move_by_default() -> None:
    agent = MinimaxAgent(depth=2)
    agent.choose_move(small())
    first = agent.tt
    agent.choose_move(small())
    assert agent.tt is not first


def test_shared_cache_is_reused() -> None:
    agent = MinimaxAgent(depth=2, shared_cache=True)
    agent.choose_move(small())
    agent.choose_move(small())
    assert agent.last_info["evaluations"] == 0
    assert agent.last_info["tt_hits"] > 0


def test_play_headless_finishes() -> None:
    outcome, rows = play_headless(MinimaxAgent(depth=2), MinimaxAgent(depth=1), small(), opening_plies=1, seed=3)

    assert outcome in {"X", "O", "D"}
    assert rows
    assert [r["ply"] for r in rows] == list(range(len(rows)))
    assert rows[0]["player"] == "O"   # one random opening ply for X
    assert {r["depth"] for r in rows} <= {1, 2}


def test_main_writes_csv(tmp_path, capsys) -> None:
    out = tmp_path / "selfplay.csv"
    code = main(["--games", "1", "--depth", "2", "--rows", "4", "--cols", "4",
                 "--connect", "3", "--opening", "0", "--out", str(out)])

    assert code == 0
    assert "SELF-PLAY RESULTS" in capsys.readouterr().out
    with open(out, newline="") as f:
        reader = csv.DictReader(f)
        assert reader.fieldnames == FIELDS
        rows = list(reader)
    assert rows
    assert all(r["depth"] == "2" for r in rows)
