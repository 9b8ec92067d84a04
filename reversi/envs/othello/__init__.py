"""Othello rules package."""

from .eval import POSITION_WEIGHTS, static_evaluate
from .state import HistoryEntry
from .utils import (
    DRAW,
    EMPTY,
    OTHELLO_SIZE,
    PLAYER_A,
    PLAYER_B,
    Move,
    apply_move,
    has_any_move,
    initial_board,
    is_valid_move,
    legal_moves,
    opponent,
    score,
)

__all__ = [
    "DRAW",
    "EMPTY",
    "OTHELLO_SIZE",
    "PLAYER_A",
    "PLAYER_B",
    "POSITION_WEIGHTS",
    "HistoryEntry",
    "Move",
    "apply_move",
    "has_any_move",
    "initial_board",
    "is_valid_move",
    "legal_moves",
    "opponent",
    "score",
    "static_evaluate",
]
