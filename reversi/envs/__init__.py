"""Environment modules."""

from .base import BoardView, SessionPhase

__all__ = ["BoardView", "SessionPhase"]
