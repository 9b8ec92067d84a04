"""Tests for the positional evaluator and minimax policy."""

import math

import numpy as np
import pytest

from reversi.envs.othello import (
    PLAYER_A,
    PLAYER_B,
    POSITION_WEIGHTS,
    apply_move,
    initial_board,
    legal_moves,
    opponent,
    static_evaluate,
)
from reversi.search import (
    SEARCH_DEPTH,
    MinimaxConfig,
    MinimaxPolicy,
    PositionalValueFn,
    StateValueFn,
)


class ConstantValueFn(StateValueFn):
    def __init__(self) -> None:
        self.calls = 0

    def evaluate(self, board, perspective):
        self.calls += 1
        return 0


def _plain_minimax(board, depth, player_to_move, perspective):
    """Reference minimax without pruning, same blocked-mover rule."""
    moves = legal_moves(board, player_to_move)
    if depth == 0 or not moves:
        return static_evaluate(board, perspective)
    values = []
    for x, y in moves:
        child = board.copy()
        apply_move(child, x, y, player_to_move)
        values.append(_plain_minimax(child, depth - 1, opponent(player_to_move), perspective))
    return max(values) if player_to_move == perspective else min(values)


def _midgame_board():
    board = initial_board()
    player = PLAYER_A
    played = 0
    while played < 8:
        moves = legal_moves(board, player)
        if moves:
            x, y = moves[-1]
            apply_move(board, x, y, player)
            played += 1
        player = opponent(player)
    if not legal_moves(board, player):
        player = opponent(player)
    return board, player


def test_weights_are_symmetric():
    assert POSITION_WEIGHTS.shape == (8, 8)
    assert np.array_equal(POSITION_WEIGHTS, POSITION_WEIGHTS.T)
    assert np.array_equal(POSITION_WEIGHTS, POSITION_WEIGHTS[::-1, :])
    assert np.array_equal(POSITION_WEIGHTS, POSITION_WEIGHTS[:, ::-1])
    assert POSITION_WEIGHTS[0, 0] == 120
    assert POSITION_WEIGHTS[1, 1] < 0
    assert POSITION_WEIGHTS[3, 3] == 3


def test_weights_are_read_only():
    with pytest.raises(ValueError):
        POSITION_WEIGHTS[0, 0] = 0


def test_static_evaluate():
    board = np.zeros((8, 8), dtype=np.int8)
    assert static_evaluate(board, PLAYER_A) == 0

    board[0, 0] = PLAYER_A
    board[1, 1] = PLAYER_B
    assert static_evaluate(board, PLAYER_A) == 120 + 60
    assert static_evaluate(board, PLAYER_B) == -(120 + 60)

    assert static_evaluate(initial_board(), PLAYER_A) == 0


def test_positional_value_fn_matches_static_evaluate():
    board, _ = _midgame_board()
    value_fn = PositionalValueFn()

    assert value_fn.evaluate(board, PLAYER_A) == static_evaluate(board, PLAYER_A)
    assert value_fn.evaluate(board, PLAYER_B) == -static_evaluate(board, PLAYER_A)


@pytest.mark.parametrize("player_to_move", [PLAYER_A, PLAYER_B])
def test_depth_zero_is_static_evaluation(player_to_move):
    board, _ = _midgame_board()
    policy = MinimaxPolicy()

    value = policy.minimax(board, 0, player_to_move, PLAYER_A, -math.inf, math.inf)

    assert value == static_evaluate(board, PLAYER_A)


def test_blocked_mover_is_scored_without_passing():
    board = np.zeros((8, 8), dtype=np.int8)
    board[0, 0] = PLAYER_A
    board[0, 1] = PLAYER_B
    assert legal_moves(board, PLAYER_B) == []
    assert legal_moves(board, PLAYER_A) == [(2, 0)]

    policy = MinimaxPolicy()
    value = policy.minimax(board, 3, PLAYER_B, PLAYER_A, -math.inf, math.inf)

    assert value == static_evaluate(board, PLAYER_A) == 140


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_pruning_matches_plain_minimax(depth):
    board, player = _midgame_board()
    policy = MinimaxPolicy()

    for x, y in legal_moves(board, player):
        child = board.copy()
        apply_move(child, x, y, player)
        expected = _plain_minimax(child, depth, opponent(player), player)
        value = policy.minimax(child, depth, opponent(player), player, -math.inf, math.inf)
        assert value == expected


def test_minimax_does_not_mutate_board():
    board, player = _midgame_board()
    before = board.copy()

    MinimaxPolicy(config=MinimaxConfig(depth=2)).select_action(board, player)

    assert np.array_equal(board, before)


def test_no_legal_move_returns_none():
    board = np.zeros((8, 8), dtype=np.int8)
    board[3, 3] = PLAYER_A

    policy = MinimaxPolicy()

    assert policy.select_action(board, PLAYER_A) is None
    assert policy.select_action(board, PLAYER_B) is None
    assert policy.last_search is not None
    assert policy.last_search.best_move is None


def test_single_legal_move_is_chosen():
    board = np.zeros((8, 8), dtype=np.int8)
    board[0, 0] = PLAYER_A
    board[0, 1] = PLAYER_B

    assert MinimaxPolicy().select_action(board, PLAYER_A) == (2, 0)


def test_symmetric_opening_prefers_first_move():
    board = initial_board()
    policy = MinimaxPolicy(config=MinimaxConfig(depth=3))

    move = policy.select_action(board, PLAYER_A)

    values = [value for _, value in policy.last_search.root_values]
    assert len(set(values)) == 1
    assert move == (4, 2)


def test_best_move_is_first_maximum():
    board, player = _midgame_board()
    policy = MinimaxPolicy(config=MinimaxConfig(depth=2))

    move = policy.select_action(board, player)
    stats = policy.last_search

    assert move in legal_moves(board, player)
    assert [m for m, _ in stats.root_values] == legal_moves(board, player)
    best_value = max(value for _, value in stats.root_values)
    assert stats.best_value == best_value
    first_best = next(m for m, value in stats.root_values if value == best_value)
    assert move == first_best
    assert stats.nodes > len(stats.root_values)


def test_search_is_deterministic():
    board, player = _midgame_board()

    first = MinimaxPolicy(config=MinimaxConfig(depth=2)).select_action(board, player)
    second = MinimaxPolicy(config=MinimaxConfig(depth=2)).select_action(board, player)

    assert first == second


def test_constant_value_fn_keeps_first_move():
    board, player = _midgame_board()
    value_fn = ConstantValueFn()
    policy = MinimaxPolicy(value_fn=value_fn, config=MinimaxConfig(depth=1))

    assert policy.select_action(board, player) == legal_moves(board, player)[0]
    assert value_fn.calls > 0


def test_default_depth():
    assert SEARCH_DEPTH == 5
    assert MinimaxPolicy().config.depth == 5


def test_default_depth_opening_reply():
    board = initial_board()
    apply_move(board, 2, 4, PLAYER_A)

    move = MinimaxPolicy().select_action(board, PLAYER_B)

    assert move in legal_moves(board, PLAYER_B)


def test_invalid_depth():
    with pytest.raises(ValueError):
        MinimaxPolicy(config=MinimaxConfig(depth=0))
