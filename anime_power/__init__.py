"""
Anime Power
===========

Query and aggregation helpers over anime characters and series.

Features:
- Immutable Character and Series records with boundary validation
- Power ranking bands (WEAK through GODLIKE)
- Pure sum / max / filter / sort / dedupe helpers
- Bundled sample dataset, plus YAML/JSON dataset loading

Quick Start:
    from anime_power import SAMPLE_CHARACTERS, find_most_powerful_character, get_power_ranking

    strongest = find_most_powerful_character(SAMPLE_CHARACTERS)
    print(strongest.name, get_power_ranking(strongest.power_level))
"""

VERSION = "0.1.0"
__version__ = VERSION

# =============================================================================
# Models
# =============================================================================

from .models import (
    PowerLevel,
    Character,
    Series,
)

# =============================================================================
# Sample Data and Loading
# =============================================================================

from .data import (
    SAMPLE_CHARACTERS,
    SAMPLE_SERIES,
    load_characters,
    load_series,
    load_dataset,
)

# =============================================================================
# Query Functions
# =============================================================================

from .utils import (
    calculate_total_power,
    find_most_powerful_character,
    get_completed_series,
    get_average_episodes,
    get_power_ranking,
    sort_characters_by_power,
    get_characters_by_series,
    get_unique_series,
    get_average_power_level,
    find_characters_with_ability,
    get_series_by_genre,
    get_longest_series,
)

# =============================================================================
# Core Utilities
# =============================================================================

from .core.config import (
    Config,
    RankingConfig,
    DataConfig,
    LoggingConfig,
    configure_logging,
    get_config,
)
from .core.exceptions import (
    AnimePowerError,
    ConfigurationError,
    ValidationError,
    DataLoadError,
)

# =============================================================================
# Public API
# =============================================================================

__all__ = [
    # Version
    "VERSION",
    "__version__",

    # Models
    "PowerLevel",
    "Character",
    "Series",

    # Data
    "SAMPLE_CHARACTERS",
    "SAMPLE_SERIES",
    "load_characters",
    "load_series",
    "load_dataset",

    # Queries
    "calculate_total_power",
    "find_most_powerful_character",
    "get_completed_series",
    "get_average_episodes",
    "get_power_ranking",
    "sort_characters_by_power",
    "get_characters_by_series",
    "get_unique_series",
    "get_average_power_level",
    "find_characters_with_ability",
    "get_series_by_genre",
    "get_longest_series",

    # Core
    "Config",
    "RankingConfig",
    "DataConfig",
    "LoggingConfig",
    "configure_logging",
    "get_config",

    # Exceptions
    "AnimePowerError",
    "ConfigurationError",
    "ValidationError",
    "DataLoadError",
]
