"""Othello rules engine, minimax opponent and game session."""
