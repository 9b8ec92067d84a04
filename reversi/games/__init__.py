"""Game sessions built on the Othello rules and the minimax policy."""

from .session import GameSession

__all__ = ["GameSession"]
