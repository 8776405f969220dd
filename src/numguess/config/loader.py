from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from platformdirs import user_config_dir

from ..exceptions import ConfigError
from ..validation import LONG_MAX

logger = logging.getLogger(__name__)

APP_NAME = "numguess"
ENV_CONFIG_FILE = "NUMGUESS_CONFIG"
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class GameConfig:
    """Startup configuration for a game session.

    - default_lower/default_upper: bounds of the first round (inclusive).
    - seed: optional RNG seed for reproducible targets.
    - log_level: level used by the console runner when no -v flag is given.
    """

    default_lower: int = 0
    default_upper: int = 100
    seed: Optional[int] = None
    log_level: str = "WARNING"

    def validate(self) -> None:
        for name in ("default_lower", "default_upper"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value < 0 or value > LONG_MAX:
                raise ConfigError(f"{name} must be between 0 and {LONG_MAX}, got {value}")
        if self.default_lower > self.default_upper:
            raise ConfigError(
                f"default_lower ({self.default_lower}) must be <= default_upper ({self.default_upper})"
            )
        if self.seed is not None and (not isinstance(self.seed, int) or isinstance(self.seed, bool)):
            raise ConfigError(f"seed must be an integer or null, got {self.seed!r}")
        if str(self.log_level).upper() not in _LOG_LEVELS:
            raise ConfigError(f"Unknown log_level {self.log_level!r}")
        self.log_level = str(self.log_level).upper()

    @staticmethod
    def _load_yaml(path: Path) -> Dict[str, Any]:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        cfg = cls(**{k: v for k, v in data.items() if k in known})
        cfg.validate()
        return cfg

    @staticmethod
    def default_user_path() -> Path:
        """Location of the user's config file.

        Honors the NUMGUESS_CONFIG environment variable, otherwise falls back
        to config.yaml under the platform user config directory.
        """
        override = os.getenv(ENV_CONFIG_FILE)
        if override:
            return Path(override).expanduser()
        return Path(user_config_dir(appname=APP_NAME, appauthor=False)) / "config.yaml"

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "GameConfig":
        """Load built-in defaults and overlay an optional user file.

        An explicitly given ``user_path`` that does not exist is logged and
        ignored, as is a missing file at the default location.
        """
        try:
            text = resources.files("numguess.config").joinpath("default_config.yaml").read_text(encoding="utf-8")
            default_data = yaml.safe_load(text) or {}
        except FileNotFoundError:
            logger.warning("Default config not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(cls())

        explicit = user_path is not None
        path = Path(user_path) if explicit else cls.default_user_path()
        user_data: Dict[str, Any] = {}
        if path.exists():
            user_data = cls._load_yaml(path)
            logger.info("Loaded user config from %s", path)
        elif explicit:
            logger.warning("User config file not found: %s", path)

        merged = cls._deep_merge(default_data, user_data)
        cfg = cls._from_dict(merged)
        logger.debug("Config merged: %s", cfg)
        return cfg

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(dataclasses.asdict(self), f, sort_keys=False)
        logger.info("Saved config to %s", path)
