"""Human vs computer Othello session: turn order, passes, undo."""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from reversi.envs.base import BoardView, SessionPhase
from reversi.envs.othello.state import HistoryEntry
from reversi.envs.othello.utils import (
    PLAYER_A,
    PLAYER_B,
    Move,
    apply_move,
    decide_winner,
    has_any_move,
    initial_board,
    is_valid_move,
    legal_moves,
    opponent,
    score,
)
from reversi.search.minimax_policy import MinimaxPolicy

logger = logging.getLogger(__name__)


class GameSession:
    """
    Turn-taking state machine for one human against the minimax opponent.

    PLAYER_A always opens. The computer takes PLAYER_A when it moves first and
    PLAYER_B otherwise; the assignment is fixed until the next
    :meth:`start_game`. Every applied move pushes a snapshot of the position
    before it, which :meth:`undo` rewinds to the last human decision.
    """

    def __init__(self, policy: Optional[MinimaxPolicy] = None) -> None:
        self.policy = policy or MinimaxPolicy()

        self._board: np.ndarray = initial_board()
        self._current_player = PLAYER_A
        self._computer_player = PLAYER_B
        self._history: List[HistoryEntry] = []
        self._last_computer_move: Optional[Move] = None
        self._phase: Optional[SessionPhase] = None
        self._winner: Optional[int] = None

    # -- transitions ---------------------------------------------------------

    def start_game(self, computer_first: bool = False) -> None:
        """Reset to the opening position and assign colours."""
        self._computer_player = PLAYER_A if computer_first else PLAYER_B
        self._board = initial_board()
        self._current_player = PLAYER_A
        self._history = []
        self._last_computer_move = None
        self._winner = None
        self._phase = self._phase_for(self._current_player)
        logger.info(
            "New game: computer plays %s",
            "first" if computer_first else "second",
        )

    def submit_human_move(self, x: int, y: int) -> bool:
        """
        Apply the human's placement at (x, y).

        Returns False without touching any state when it is not the human's
        turn or the placement is illegal.
        """
        if self._phase is not SessionPhase.AWAITING_HUMAN_MOVE:
            return False
        if not is_valid_move(self._board, x, y, self._current_player):
            logger.debug("Rejected illegal move (%d, %d)", x, y)
            return False

        self._history.append(HistoryEntry.capture(self._board, self._current_player))
        apply_move(self._board, x, y, self._current_player)
        logger.debug("Human played (%d, %d)", x, y)
        self._end_turn()
        return True

    def request_computer_move(self) -> Optional[Move]:
        """
        Let the computer search and play. Blocks until the search finishes.

        Returns the move played, or None when the computer had to pass.
        """
        if self._phase is not SessionPhase.AWAITING_COMPUTER_MOVE:
            raise ValueError(f"Computer cannot move in phase {self._phase}")

        move = self.policy.select_action(self._board, self._current_player)
        if move is None:
            logger.info("Computer has no legal move and passes")
            self._end_turn()
            return None

        self._history.append(HistoryEntry.capture(self._board, self._current_player))
        self._last_computer_move = move
        apply_move(self._board, move[0], move[1], self._current_player)
        logger.debug("Computer played %s", move)
        self._end_turn()
        return move

    def undo(self) -> bool:
        """
        Rewind to the most recent position where the human was to move.

        Computer entries on top of the stack are discarded along the way.
        Returns False when no such position exists.
        """
        while self._history:
            entry = self._history.pop()
            if entry.player != self._computer_player:
                self._board = entry.restore_board()
                self._current_player = entry.player
                self._last_computer_move = None
                self._winner = None
                self._phase = SessionPhase.AWAITING_HUMAN_MOVE
                logger.info("Undo: %d entries left", len(self._history))
                return True

        logger.info("Undo unavailable")
        return False

    def set_state(self, board: np.ndarray, current_player: int) -> None:
        """
        Load an arbitrary position with ``current_player`` to move.

        History is cleared and the usual pass / game-over rule is applied to
        the loaded position.
        """
        if board.shape != self._board.shape:
            raise ValueError(f"Board must have shape {self._board.shape}, got {board.shape}")
        if current_player not in (PLAYER_A, PLAYER_B):
            raise ValueError(f"Invalid player: {current_player}")

        self._board = board.astype(np.int8, copy=True)
        self._current_player = current_player
        self._history = []
        self._last_computer_move = None
        self._winner = None
        self._settle_turn()

    def _end_turn(self) -> None:
        self._current_player = opponent(self._current_player)
        self._settle_turn()

    def _settle_turn(self) -> None:
        if not has_any_move(self._board, self._current_player):
            logger.debug("Player %d has no legal move and passes", self._current_player)
            self._current_player = opponent(self._current_player)
            if not has_any_move(self._board, self._current_player):
                self._phase = SessionPhase.GAME_OVER
                self._winner = decide_winner(self._board)
                logger.info(
                    "Game over: winner=%d, score %d-%d",
                    self._winner,
                    score(self._board, PLAYER_A),
                    score(self._board, PLAYER_B),
                )
                return
        self._phase = self._phase_for(self._current_player)

    def _phase_for(self, player: int) -> SessionPhase:
        if player == self._computer_player:
            return SessionPhase.AWAITING_COMPUTER_MOVE
        return SessionPhase.AWAITING_HUMAN_MOVE

    # -- read side -----------------------------------------------------------

    @property
    def board(self) -> np.ndarray:
        return self._board.copy()

    @property
    def current_player(self) -> int:
        return self._current_player

    @property
    def computer_player(self) -> int:
        return self._computer_player

    @property
    def human_player(self) -> int:
        return opponent(self._computer_player)

    @property
    def phase(self) -> SessionPhase:
        if self._phase is None:
            raise ValueError("Game not started. Call start_game() first.")
        return self._phase

    @property
    def done(self) -> bool:
        return self._phase is SessionPhase.GAME_OVER

    @property
    def winner(self) -> Optional[int]:
        return self._winner

    @property
    def last_computer_move(self) -> Optional[Move]:
        return self._last_computer_move

    @property
    def can_undo(self) -> bool:
        return any(entry.player != self._computer_player for entry in self._history)

    def legal_moves(self) -> List[Move]:
        """Legal moves for the side to move; empty once the game is over."""
        if self.done:
            return []
        return legal_moves(self._board, self._current_player)

    def score(self, player: int) -> int:
        return score(self._board, player)

    def view(self) -> BoardView:
        return BoardView(
            grid=self.board,
            current_player=self._current_player,
            phase=self.phase,
            legal_moves=self.legal_moves(),
            last_computer_move=self._last_computer_move,
            scores={PLAYER_A: self.score(PLAYER_A), PLAYER_B: self.score(PLAYER_B)},
            winner=self._winner,
        )
