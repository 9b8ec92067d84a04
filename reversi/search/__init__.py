"""Search algorithms (minimax) and value functions."""

from .value_fn import PositionalValueFn, StateValueFn
from .minimax_policy import SEARCH_DEPTH, MinimaxConfig, MinimaxPolicy, SearchStats

__all__ = [
    "PositionalValueFn",
    "StateValueFn",
    "MinimaxPolicy",
    "MinimaxConfig",
    "SearchStats",
    "SEARCH_DEPTH",
]
