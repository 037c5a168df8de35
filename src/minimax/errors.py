# src/minimax/errors.py
from __future__ import annotations


class MinimaxError(Exception):
    pass


class InvalidStateError(MinimaxError, ValueError):
    """A caller-supplied state broke the State contract."""


class UnevaluatedNodeError(MinimaxError):
    pass
