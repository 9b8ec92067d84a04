"""Board primitives for Othello: legality, flipping, scoring."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

OTHELLO_SIZE = 8

EMPTY = 0
PLAYER_A = 1
PLAYER_B = -1
DRAW = 0

Move = Tuple[int, int]

# (dx, dy) unit vectors, (0, 0) excluded
DIRECTIONS: Tuple[Move, ...] = (
    (0, 1),
    (1, 0),
    (0, -1),
    (-1, 0),
    (1, 1),
    (-1, -1),
    (1, -1),
    (-1, 1),
)


def opponent(player: int) -> int:
    """Return the other stone colour."""
    return -player


def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < OTHELLO_SIZE and 0 <= y < OTHELLO_SIZE


def initial_board() -> np.ndarray:
    """
    Create the standard starting position.

    The board is indexed ``board[y, x]``. PLAYER_A holds (3, 3) and (4, 4),
    PLAYER_B holds (4, 3) and (3, 4), all other cells are empty.
    """
    board = np.zeros((OTHELLO_SIZE, OTHELLO_SIZE), dtype=np.int8)
    board[3, 3] = PLAYER_A
    board[4, 4] = PLAYER_A
    board[3, 4] = PLAYER_B
    board[4, 3] = PLAYER_B
    return board


def get_flips(board: np.ndarray, x: int, y: int, player: int) -> List[Move]:
    """Cells flipped by placing ``player`` at (x, y); empty if the cell is taken or off the board."""
    if not in_bounds(x, y) or board[y, x] != EMPTY:
        return []

    other = opponent(player)
    flips: List[Move] = []
    for dx, dy in DIRECTIONS:
        cx, cy = x + dx, y + dy
        line: List[Move] = []
        while in_bounds(cx, cy) and board[cy, cx] == other:
            line.append((cx, cy))
            cx, cy = cx + dx, cy + dy
        # a run only counts when capped by the mover's own stone
        if line and in_bounds(cx, cy) and board[cy, cx] == player:
            flips += line
    return flips


def is_valid_move(board: np.ndarray, x: int, y: int, player: int) -> bool:
    """Check whether ``player`` may place a stone at (x, y)."""
    if not in_bounds(x, y) or board[y, x] != EMPTY:
        return False

    other = opponent(player)
    for dx, dy in DIRECTIONS:
        nx, ny = x + dx, y + dy
        count = 0
        while in_bounds(nx, ny) and board[ny, nx] == other:
            nx += dx
            ny += dy
            count += 1
        if count and in_bounds(nx, ny) and board[ny, nx] == player:
            return True
    return False


def _candidate_mask(board: np.ndarray, player: int) -> np.ndarray:
    """Empty cells with at least one opponent stone among their 8 neighbours."""
    padded = np.pad(board == opponent(player), 1)
    near = np.zeros((OTHELLO_SIZE, OTHELLO_SIZE), dtype=bool)
    for dx, dy in DIRECTIONS:
        near |= padded[1 + dy : 1 + dy + OTHELLO_SIZE, 1 + dx : 1 + dx + OTHELLO_SIZE]
    return near & (board == EMPTY)


def legal_moves(board: np.ndarray, player: int) -> List[Move]:
    """
    All legal placements for ``player`` in row-major order (y outer, x inner).

    Search tie-breaking relies on this order.
    """
    candidates = _candidate_mask(board, player)
    return [
        (int(x), int(y))
        for y, x in zip(*np.nonzero(candidates))
        if is_valid_move(board, int(x), int(y), player)
    ]


def apply_move(board: np.ndarray, x: int, y: int, player: int) -> List[Move]:
    """
    Place ``player`` at (x, y) and flip every captured run, in place.

    The move must be legal; it is not re-validated here. Returns the flipped
    cells.
    """
    flips = get_flips(board, x, y, player)
    board[y, x] = player
    for fx, fy in flips:
        board[fy, fx] = player
    return flips


def has_any_move(board: np.ndarray, player: int) -> bool:
    return len(legal_moves(board, player)) > 0


def score(board: np.ndarray, player: int) -> int:
    """Number of cells owned by ``player``."""
    return int(np.count_nonzero(board == player))


def count_pieces(board: np.ndarray) -> Tuple[int, int]:
    """
    Count stones for each player.

    Returns:
        Tuple of (player_a_count, player_b_count).
    """
    return score(board, PLAYER_A), score(board, PLAYER_B)


def decide_winner(board: np.ndarray) -> int:
    """PLAYER_A, PLAYER_B or DRAW by stone count; strictly more stones wins."""
    a_count, b_count = count_pieces(board)
    if a_count > b_count:
        return PLAYER_A
    if b_count > a_count:
        return PLAYER_B
    return DRAW
