"""Configuration schema for interactive games."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from reversi.search.minimax_policy import SEARCH_DEPTH, MinimaxConfig

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SearchConfig:
    depth: int = SEARCH_DEPTH

    def to_minimax(self) -> MinimaxConfig:
        return MinimaxConfig(depth=self.depth)


@dataclass
class PlayConfig:
    human_first: bool = True
    computer_delay: float = 0.5  # seconds shown before the computer replies
    show_hints: bool = True


@dataclass
class AppConfig:
    search: SearchConfig = field(default_factory=SearchConfig)
    play: PlayConfig = field(default_factory=PlayConfig)
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        unknown = set(data) - {"search", "play", "log_level"}
        if unknown:
            raise ValueError(f"Unknown config sections: {sorted(unknown)}")

        search_data = _section(data, "search", SearchConfig)
        search = SearchConfig(depth=int(search_data.get("depth", SEARCH_DEPTH)))
        if search.depth < 1:
            raise ValueError(f"search.depth must be >= 1, got {search.depth}")

        play_data = _section(data, "play", PlayConfig)
        play = PlayConfig(
            human_first=_flag(play_data, "play", "human_first", True),
            computer_delay=float(play_data.get("computer_delay", 0.5)),
            show_hints=_flag(play_data, "play", "show_hints", True),
        )
        if play.computer_delay < 0:
            raise ValueError(f"play.computer_delay must be >= 0, got {play.computer_delay}")

        log_level = str(data.get("log_level", "WARNING")).upper()
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}, got {log_level!r}")

        return cls(search=search, play=play, log_level=log_level)


def _section(data: Dict[str, Any], name: str, schema: type) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping, got {type(section)}")
    allowed = {f.name for f in fields(schema)}
    unknown = set(section) - allowed
    if unknown:
        raise ValueError(f"Unknown keys in '{name}': {sorted(unknown)}")
    return section


def _flag(section: Dict[str, Any], name: str, key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"{name}.{key} must be true or false, got {value!r}")
    return value


def load_config(path: Union[str, Path]) -> AppConfig:
    """Load AppConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if data is None:
        return AppConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)
