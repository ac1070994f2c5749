"""Game configuration management."""

from functools import lru_cache
from pathlib import Path

from .schemas import GameConfig
from .utils import load_json_safe

CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'game_config.json'


@lru_cache(maxsize=1)
def get_config() -> GameConfig:
    """
    Load game configuration from data/game_config.json.

    Configuration is cached after first load. A missing or invalid file
    falls back to the built-in defaults (single-player, 3 lives, 4 in
    team mode, half-second wrong-guess pulse).

    Returns:
        GameConfig object with validated settings

    Example:
        from feud.config import get_config
        config = get_config()
        print(f"Mode: {config.mode}")
    """
    return load_json_safe(CONFIG_PATH, default=GameConfig(), schema=GameConfig)


def get_starting_lives(mode: str) -> int:
    """Get the number of lives a round starts with in the given mode."""
    config = get_config()
    return config.team_lives if mode == 'team' else config.single_player_lives


def get_wrong_flash_seconds() -> float:
    """Get how long the wrong-guess pulse stays on."""
    return get_config().wrong_flash_seconds


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if game_config.json is modified during runtime.
    """
    get_config.cache_clear()
