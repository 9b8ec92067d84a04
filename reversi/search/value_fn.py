"""Board value functions for search algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from reversi.envs.othello.eval import static_evaluate


class StateValueFn(ABC):
    """
    Board evaluator that returns a value for ``perspective``.
    """

    @abstractmethod
    def evaluate(self, board: np.ndarray, perspective: int) -> float:
        """
        Higher is better for ``perspective``.
        """
        ...


class PositionalValueFn(StateValueFn):
    """Fixed positional weight table, see :data:`POSITION_WEIGHTS`."""

    def evaluate(self, board: np.ndarray, perspective: int) -> float:
        return static_evaluate(board, perspective)
