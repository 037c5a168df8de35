from .scoring import evaluate, heuristic_for, window_score
from .state import ConnectState, Drop

__all__ = [
    "evaluate",
    "heuristic_for",
    "window_score",
    "ConnectState",
    "Drop",
]
