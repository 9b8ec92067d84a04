"""Othello history snapshot dataclass."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class HistoryEntry:
    board: np.ndarray
    player: int

    @classmethod
    def capture(cls, board: np.ndarray, player: int) -> "HistoryEntry":
        """Snapshot ``board`` into a private read-only copy."""
        snapshot = board.copy()
        snapshot.setflags(write=False)
        return cls(board=snapshot, player=player)

    def restore_board(self) -> np.ndarray:
        """Return a fresh writable copy of the recorded board."""
        return self.board.copy()
