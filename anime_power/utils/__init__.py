"""
Utilities
=========

Query and aggregation functions over characters and series.
"""

from .characters import (
    calculate_total_power,
    find_most_powerful_character,
    sort_characters_by_power,
    get_characters_by_series,
    get_unique_series,
    get_average_power_level,
    find_characters_with_ability,
)
from .series import (
    get_completed_series,
    get_average_episodes,
    get_series_by_genre,
    get_longest_series,
)
from .ranking import get_power_ranking
from .numbers import round_half_up

__all__ = [
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
    "round_half_up",
]
