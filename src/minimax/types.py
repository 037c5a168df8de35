# src/minimax/types.py

from __future__ import annotations
from typing import Literal, TypeVar

from minimax.core.state import Action, State

S = TypeVar("S", bound=State)    # caller's game state
A = TypeVar("A", bound=Action)   # caller's action

Player = Literal["X", "O"]
