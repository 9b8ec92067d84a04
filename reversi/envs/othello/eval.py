"""Othello positional evaluation for search algorithms."""

from __future__ import annotations

import numpy as np

# Corners are stable, X/C-squares hand the corner to the opponent.
POSITION_WEIGHTS = np.array([
    [120, -20,  20,   5,   5,  20, -20, 120],
    [-20, -60, -10,  -5,  -5, -10, -60, -20],
    [ 20, -10,  15,   3,   3,  15, -10,  20],
    [  5,  -5,   3,   3,   3,   3,  -5,   5],
    [  5,  -5,   3,   3,   3,   3,  -5,   5],
    [ 20, -10,  15,   3,   3,  15, -10,  20],
    [-20, -60, -10,  -5,  -5, -10, -60, -20],
    [120, -20,  20,   5,   5,  20, -20, 120],
], dtype=np.int32)
POSITION_WEIGHTS.setflags(write=False)


def static_evaluate(board: np.ndarray, perspective: int) -> int:
    """
    Weighted disc balance from ``perspective``'s point of view.

    Own stones add their cell weight, opponent stones subtract it and empty
    cells contribute nothing.
    """
    return int(np.sum(POSITION_WEIGHTS * board)) * perspective
