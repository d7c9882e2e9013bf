"""
Configuration management for the XSPF builder.

Loads and validates TOML config. Every tunable parameter is bounded or
restricted to a set of choices and validated at load time.
"""

import os
from pathlib import Path
from typing import Dict, Any, Optional
import copy
import logging

import toml

from .errors import ConfigError

logger = logging.getLogger(__name__)


class Config:
    """Configuration loader and validator."""

    # Numeric parameters: (min, max). Choice parameters: set of allowed values.
    PARAM_BOUNDS = {
        "logging": {
            "level": {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
        },
        "tags": {
            "fill_title": bool,
            "fill_creator": bool,
            "title_from_filename": bool,
            "max_field_length": (16, 4096),
        },
    }

    DEFAULT_CONFIG = {
        "config_version": "1.0",
        "logging": {
            "level": "INFO",
        },
        "tags": {
            "fill_title": True,
            "fill_creator": True,
            "title_from_filename": False,
            "max_field_length": 1024,
        },
    }

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        """Initialize config from dictionary."""
        self.data = config_dict if config_dict is not None else copy.deepcopy(self.DEFAULT_CONFIG)
        self._validate()

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        """
        Load config from TOML file.

        Args:
            config_path: Path to xspf.toml. If None, uses XSPF_CONFIG_PATH env var
                        or defaults to configs/xspf.toml.

        Returns:
            Config instance.

        Raises:
            ConfigError: If config is invalid or cannot be parsed.
        """
        if config_path is None:
            config_path = os.getenv("XSPF_CONFIG_PATH", "configs/xspf.toml")

        config_path = Path(config_path)

        if not config_path.exists():
            logger.warning(f"Config file not found: {config_path}. Using defaults.")
            return cls(copy.deepcopy(cls.DEFAULT_CONFIG))

        try:
            config_dict = toml.load(config_path)
        except (toml.TomlDecodeError, OSError) as e:
            raise ConfigError(f"Failed to load config from {config_path}: {e}") from e

        logger.info(f"Loaded config from {config_path}")
        return cls(config_dict)

    def _validate(self) -> None:
        """
        Validate all config parameters against PARAM_BOUNDS.

        Raises:
            ConfigError: If any parameter is out of bounds or of the wrong type.
        """
        for section, params in self.PARAM_BOUNDS.items():
            if section not in self.data:
                logger.warning(f"Missing config section: {section}. Using defaults.")
                self.data[section] = copy.deepcopy(self.DEFAULT_CONFIG[section])
                continue

            section_data = self.data[section]
            if not isinstance(section_data, dict):
                raise ConfigError(f"Config section {section} must be a table")

            for param, bounds in params.items():
                if param not in section_data:
                    default_val = self.DEFAULT_CONFIG[section][param]
                    logger.warning(f"Missing param {section}.{param}. Using default: {default_val}")
                    section_data[param] = default_val
                    continue

                value = section_data[param]

                if bounds is bool:
                    if not isinstance(value, bool):
                        raise ConfigError(f"Parameter {section}.{param}={value!r} must be true or false")

                elif isinstance(bounds, set):
                    if value not in bounds:
                        raise ConfigError(
                            f"Parameter {section}.{param}={value!r} not one of {sorted(bounds)}"
                        )

                elif isinstance(bounds, tuple):
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

    def __getitem__(self, section: str) -> Dict[str, Any]:
        """Allow dict-like access: config["tags"]"""
        return self.data.get(section, {})

    def __repr__(self) -> str:
        version = self.data.get('config_version', 'unknown')
        return f"Config(version={version})"
