"""
Configuration management for Playlist Manager.

Loads an optional TOML config and validates it at startup. Missing
sections and params fall back to defaults; invalid values raise ConfigError.
"""

import copy
import os
from pathlib import Path
from typing import Dict, Any, Optional
import toml
import logging

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "🎵 Rap Music Playlist Manager 🎵"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when config validation fails."""
    pass


class Config:
    """Configuration loader and validator."""

    # Allowed values per param: (min, max) for ints, tuple of str for choices,
    # type for free values.
    PARAM_BOUNDS = {
        "ui": {
            "title": str,
        },
        "shuffle": {
            "seed": (0, 2**63 - 1),
        },
        "logging": {
            "level": LOG_LEVELS,
        },
    }

    DEFAULT_CONFIG = {
        "config_version": "1.0",
        "ui": {
            "title": DEFAULT_TITLE,
        },
        "shuffle": {
            # No "seed" key: shuffles are unseeded
        },
        "logging": {
            "level": "ERROR",
        },
    }

    def __init__(self, config_dict: Dict[str, Any]):
        """Initialize config from dictionary."""
        self.data = config_dict
        self._validate()

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        """
        Load config from TOML file.

        Args:
            config_path: Path to playlist_manager.toml. If None, uses
                        PLAYLIST_MANAGER_CONFIG_PATH env var or defaults to
                        configs/playlist_manager.toml.

        Returns:
            Config instance.

        Raises:
            ConfigError: If config is invalid or unreadable.
        """
        if config_path is None:
            config_path = os.getenv("PLAYLIST_MANAGER_CONFIG_PATH", "configs/playlist_manager.toml")

        config_path = Path(config_path)

        if not config_path.exists():
            logger.warning(f"Config file not found: {config_path}. Using defaults.")
            return cls(copy.deepcopy(cls.DEFAULT_CONFIG))

        try:
            config_dict = toml.load(config_path)
        except (OSError, toml.TomlDecodeError) as e:
            raise ConfigError(f"Failed to load config from {config_path}: {e}")

        logger.info(f"Loaded config from {config_path}")
        return cls(config_dict)

    def _validate(self) -> None:
        """
        Validate all config parameters against PARAM_BOUNDS.

        Raises:
            ConfigError: If any parameter has the wrong type or is out of bounds.
        """
        for section, params in self.PARAM_BOUNDS.items():
            if section not in self.data:
                logger.warning(f"Missing config section: {section}. Using defaults.")
                self.data[section] = copy.deepcopy(self.DEFAULT_CONFIG.get(section, {}))
                continue

            section_data = self.data[section]
            if not isinstance(section_data, dict):
                raise ConfigError(f"Config section {section} must be a table")

            for param, bounds in params.items():
                if param not in section_data:
                    default_val = self.DEFAULT_CONFIG.get(section, {}).get(param)
                    if default_val is not None:
                        logger.warning(f"Missing param {section}.{param}. Using default: {default_val}")
                        section_data[param] = default_val
                    continue

                value = section_data[param]

                if isinstance(bounds, type):
                    if not isinstance(value, bounds):
                        raise ConfigError(
                            f"Parameter {section}.{param}={value!r} must be {bounds.__name__}"
                        )
                    continue

                # Choice of strings
                if all(isinstance(b, str) for b in bounds):
                    if not isinstance(value, str) or value.upper() not in bounds:
                        raise ConfigError(
                            f"Parameter {section}.{param}={value!r} not one of {list(bounds)}"
                        )
                    section_data[param] = value.upper()
                    continue

                min_val, max_val = bounds
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ConfigError(f"Parameter {section}.{param}={value!r} must be an integer")
                if not (min_val <= value <= max_val):
                    raise ConfigError(
                        f"Parameter {section}.{param}={value} out of bounds "
                        f"[{min_val}, {max_val}]"
                    )

        logger.debug("Config validation passed")

    def get(self, section: str, param: str, default: Any = None) -> Any:
        """Get a config parameter safely."""
        return self.data.get(section, {}).get(param, default)

    @property
    def title(self) -> str:
        return self.get("ui", "title", DEFAULT_TITLE)

    @property
    def shuffle_seed(self) -> Optional[int]:
        return self.get("shuffle", "seed")

    @property
    def log_level(self) -> str:
        return self.get("logging", "level", "ERROR")

    def __getitem__(self, section: str) -> Dict[str, Any]:
        """Allow dict-like access: config["ui"]"""
        return self.data.get(section, {})

    def __repr__(self) -> str:
        version = self.data.get('config_version', 'unknown')
        return f"Config(version={version})"
