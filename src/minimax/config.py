# src/minimax/config.py

from __future__ import annotations

# Demo game board (connect four)
ROWS = 6
COLS = 7
CONNECT_N = 4

# Search defaults
MINIMAX_DEPTH = 4
AI_TIME_LIMIT_SEC = 0.0  # 0 disables the wall-clock cutoff
WIN_SCORE = 1_000_000.0

# Transposition table bound (None = unbounded)
TT_MAX_ENTRIES = None

# Self-play output
RESULTS_DIR = "data/results"
RESULTS_PATTERN = "selfplay_*.csv"
