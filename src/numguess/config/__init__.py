"""Game configuration: packaged YAML defaults plus an optional user override."""

from .loader import APP_NAME, ENV_CONFIG_FILE, GameConfig

__all__ = ["APP_NAME", "ENV_CONFIG_FILE", "GameConfig"]
