"""Config package exports."""

from .schema import AppConfig, PlayConfig, SearchConfig, load_config

__all__ = [
    "AppConfig",
    "PlayConfig",
    "SearchConfig",
    "load_config",
]
