"""
Core Module
===========

Configuration and exceptions for Anime Power.
"""

from .config import (
    Config,
    RankingConfig,
    DataConfig,
    LoggingConfig,
    configure_logging,
    get_config,
    set_config,
    reset_config,
)
from .exceptions import (
    AnimePowerError,
    ConfigurationError,
    ValidationError,
    DataLoadError,
)

__all__ = [
    # Configuration
    "Config",
    "RankingConfig",
    "DataConfig",
    "LoggingConfig",
    "configure_logging",
    "get_config",
    "set_config",
    "reset_config",
    # Exceptions
    "AnimePowerError",
    "ConfigurationError",
    "ValidationError",
    "DataLoadError",
]
