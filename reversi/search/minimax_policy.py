"""Minimax search policy with alpha-beta pruning."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from reversi.envs.othello.utils import Move, apply_move, legal_moves, opponent
from .value_fn import PositionalValueFn, StateValueFn

logger = logging.getLogger(__name__)

SEARCH_DEPTH = 5


@dataclass
class MinimaxConfig:
    depth: int = SEARCH_DEPTH


@dataclass
class SearchStats:
    """Diagnostics of the most recent root search."""

    nodes: int = 0
    best_move: Optional[Move] = None
    best_value: float = -math.inf
    root_values: List[Tuple[Move, float]] = field(default_factory=list)


class MinimaxPolicy:
    """
    Fixed-depth minimax over explicit max/min layers.

    Values are always signed from the root player's perspective. A node whose
    mover has no legal move is scored statically on the spot: the turn is not
    handed to the opponent.
    """

    def __init__(
        self,
        value_fn: Optional[StateValueFn] = None,
        config: Optional[MinimaxConfig] = None,
    ) -> None:
        self.value_fn = value_fn or PositionalValueFn()
        self.config = config or MinimaxConfig()
        if self.config.depth < 1:
            raise ValueError("Minimax depth must be >= 1")
        self.last_search: Optional[SearchStats] = None
        self._nodes = 0

    def select_action(self, board: np.ndarray, player: int) -> Optional[Move]:
        """
        Pick the move with the highest minimax value for ``player``.

        Returns None when ``player`` has no legal move. Every root move is
        searched with a full window; on equal values the earlier move in
        row-major order is kept.
        """
        moves = legal_moves(board, player)
        stats = SearchStats()
        self.last_search = stats
        if not moves:
            logger.debug("No legal move for player %d", player)
            return None

        self._nodes = 0
        for x, y in moves:
            child = board.copy()
            apply_move(child, x, y, player)
            value = self.minimax(
                child,
                depth=self.config.depth,
                player_to_move=opponent(player),
                perspective=player,
                alpha=-math.inf,
                beta=math.inf,
            )
            stats.root_values.append(((x, y), value))

            if value > stats.best_value:
                stats.best_value = value
                stats.best_move = (x, y)

        stats.nodes = self._nodes
        logger.debug(
            "Player %d plays %s (value=%s, nodes=%d)",
            player,
            stats.best_move,
            stats.best_value,
            stats.nodes,
        )
        return stats.best_move

    def minimax(
        self,
        board: np.ndarray,
        depth: int,
        player_to_move: int,
        perspective: int,
        alpha: float,
        beta: float,
    ) -> float:
        self._nodes += 1
        if depth == 0:
            return self.value_fn.evaluate(board, perspective)

        moves = legal_moves(board, player_to_move)
        if not moves:
            return self.value_fn.evaluate(board, perspective)

        next_player = opponent(player_to_move)

        if player_to_move == perspective:
            value = -math.inf
            for x, y in moves:
                child = board.copy()
                apply_move(child, x, y, player_to_move)
                child_value = self.minimax(
                    child, depth - 1, next_player, perspective, alpha, beta
                )
                if child_value > value:
                    value = child_value
                if child_value > alpha:
                    alpha = child_value
                if beta <= alpha:
                    break
            return value

        value = math.inf
        for x, y in moves:
            child = board.copy()
            apply_move(child, x, y, player_to_move)
            child_value = self.minimax(
                child, depth - 1, next_player, perspective, alpha, beta
            )
            if child_value < value:
                value = child_value
            if child_value < beta:
                beta = child_value
            if beta <= alpha:
                break
        return value
