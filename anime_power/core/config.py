"""
Configuration System
====================

Centralized, validated configuration management with typed dataclasses.
"""

import os
import re
import math
import sys
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Dict, Any, Union
import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Dataclasses
# =============================================================================


@dataclass
class RankingConfig:
    """
    Lower bounds (inclusive) of the power ranking bands.

    Numeric strings such as "12000" are accepted, so thresholds can come
    from ${VAR} interpolation in the config file.
    """

    godlike: float = 10000
    legendary: float = 8000
    strong: float = 5000
    moderate: float = 2000

    def __post_init__(self):
        for name in ("godlike", "legendary", "strong", "moderate"):
            setattr(self, name, self._coerce(getattr(self, name)))
        self.validate()

    @staticmethod
    def _coerce(value: Any) -> Any:
        """Convert a numeric string to int or float; leave anything else alone."""
        if not isinstance(value, str):
            return value
        for cast in (int, float):
            try:
                return cast(value.strip())
            except ValueError:
                continue
        return value

    def validate(self) -> None:
        """Validate threshold values."""
        bands = [
            ("godlike", self.godlike),
            ("legendary", self.legendary),
            ("strong", self.strong),
            ("moderate", self.moderate),
        ]
        for name, value in bands:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(
                    f"{name} threshold must be a number, got {value!r}",
                    config_key=f"ranking.{name}",
                    expected_type="number",
                )
            if not math.isfinite(value):
                raise ConfigurationError(
                    f"{name} threshold must be finite, got {value}",
                    config_key=f"ranking.{name}",
                )
            if value < 0:
                raise ConfigurationError(
                    f"{name} threshold must be non-negative, got {value}",
                    config_key=f"ranking.{name}",
                )

        for (upper_name, upper), (lower_name, lower) in zip(bands, bands[1:]):
            if upper <= lower:
                raise ConfigurationError(
                    f"{upper_name} threshold ({upper}) must be above {lower_name} ({lower})",
                    config_key=f"ranking.{upper_name}",
                )


@dataclass
class DataConfig:
    """Dataset source settings."""

    # YAML or JSON file with `characters` and `series` lists.
    # None means the bundled sample data.
    dataset_path: Optional[str] = None


@dataclass
class LoggingConfig:
    """Logging settings for the `anime_power` logger."""

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Validate configuration values."""
        if str(self.level).upper() not in self.VALID_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {self.level}",
                config_key="logging.level",
            )


# =============================================================================
# Main Configuration Class
# =============================================================================


@dataclass
class Config:
    """
    Main configuration container with validation and loading.

    Provides a unified interface to all configuration settings with:
    - Type-safe access to configuration values
    - Validation on load
    - Environment variable interpolation
    - Defaults that reproduce the library's built-in behaviour
    """

    ranking: RankingConfig = field(default_factory=RankingConfig)
    data: DataConfig = field(default_factory=DataConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "Config":
        """
        Load configuration from file with environment variable interpolation.

        Args:
            path: Path to YAML config file, searched before the default locations

        Returns:
            Validated Config instance
        """
        search_paths = [
            Path("./config/anime_power.yaml"),
            Path("./anime_power.yaml"),
            Path.home() / ".anime-power" / "config.yaml",
        ]

        if path:
            search_paths.insert(0, Path(path))

        config_data = {}

        for search_path in search_paths:
            if search_path.exists():
                logger.info(f"Loading config from: {search_path}")
                try:
                    with open(search_path, "r", encoding="utf-8") as f:
                        config_data = yaml.safe_load(f) or {}
                    break
                except (yaml.YAMLError, UnicodeDecodeError) as e:
                    raise ConfigurationError(
                        f"Invalid YAML in config file: {e}",
                        config_key=str(search_path),
                    )
        else:
            logger.info("No config file found, using defaults")

        if not isinstance(config_data, dict):
            raise ConfigurationError(
                "Config file must contain a mapping",
                expected_type="mapping",
            )

        config_data = cls._interpolate_env_vars(config_data)

        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create Config from dictionary with validation."""
        try:
            return cls(
                ranking=RankingConfig(**(data.get("ranking") or {})),
                data=DataConfig(**(data.get("data") or {})),
                logging=LoggingConfig(**(data.get("logging") or {})),
            )
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")

    @staticmethod
    def _interpolate_env_vars(data: Any) -> Any:
        """Recursively interpolate ${VAR} patterns with environment variables."""
        if isinstance(data, str):
            # Handle ${VAR} and ${VAR:-default} patterns
            pattern = r"\$\{([^}:]+)(?::-([^}]*))?\}"

            def replace(match):
                var_name = match.group(1)
                default = match.group(2) or ""
                return os.environ.get(var_name, default)

            return re.sub(pattern, replace, data)
        elif isinstance(data, dict):
            return {k: Config._interpolate_env_vars(v) for k, v in data.items()}
        elif isinstance(data, list):
            return [Config._interpolate_env_vars(item) for item in data]
        return data

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "ranking": asdict(self.ranking),
            "data": asdict(self.data),
            "logging": asdict(self.logging),
        }


# =============================================================================
# Convenience Functions
# =============================================================================


_global_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance (lazily loaded)."""
    global _global_config
    if _global_config is None:
        _global_config = Config.load()
    return _global_config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def reset_config() -> None:
    """Reset global configuration to None (forces reload on next access)."""
    global _global_config
    _global_config = None


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Attach a stdout handler to the package logger.

    The library never does this on import; applications opt in.

    Args:
        config: Logging settings (defaults to the global config's)

    Returns:
        The configured `anime_power` logger
    """
    config = config or get_config().logging

    package_logger = logging.getLogger("anime_power")
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=config.format, datefmt="%Y-%m-%d %H:%M:%S"))
        package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, config.level.upper()))

    return package_logger
