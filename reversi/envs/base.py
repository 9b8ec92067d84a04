"""Core interfaces shared by the game session and its front ends."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

import numpy as np


class SessionPhase(str, Enum):
    AWAITING_HUMAN_MOVE = "awaiting_human_move"
    AWAITING_COMPUTER_MOVE = "awaiting_computer_move"
    GAME_OVER = "game_over"


@dataclass(frozen=True, slots=True)
class BoardView:
    """Everything a renderer needs to draw one board state."""

    grid: np.ndarray
    current_player: int
    phase: SessionPhase
    legal_moves: List[Tuple[int, int]]
    last_computer_move: Optional[Tuple[int, int]]
    scores: Dict[int, int]
    winner: Optional[int]

    @property
    def done(self) -> bool:
        """Return True once neither side can move."""
        return self.phase is SessionPhase.GAME_OVER
