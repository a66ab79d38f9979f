"""
Character Queries
=================

Pure aggregation and filter functions over character records.

None of these mutate their input; filters and sorts return new lists.
"""

import logging
from typing import Iterable, List, Optional

from ..models.character import Character
from .matching import contains_ignore_case
from .numbers import rounded_mean

logger = logging.getLogger(__name__)


def calculate_total_power(characters: Iterable[Character]) -> float:
    """
    Calculate the total power level of multiple characters.

    Args:
        characters: Characters to sum

    Returns:
        Sum of all power levels, 0 for no characters
    """
    return sum((character.power_level for character in characters), 0)


def find_most_powerful_character(characters: Iterable[Character]) -> Optional[Character]:
    """
    Find the character with the highest power level.

    Ties go to the character seen first.

    Args:
        characters: Characters to search

    Returns:
        The most powerful character, or None if there are none
    """
    strongest: Optional[Character] = None
    for character in characters:
        if strongest is None or character.power_level > strongest.power_level:
            strongest = character

    if strongest is None:
        logger.debug("find_most_powerful_character called with no characters")
    return strongest


def sort_characters_by_power(characters: Iterable[Character]) -> List[Character]:
    """
    Sort characters by power level, strongest first.

    The sort is stable: equal power levels keep their input order.
    """
    return sorted(characters, key=lambda character: character.power_level, reverse=True)


def get_characters_by_series(characters: Iterable[Character], series: str) -> List[Character]:
    """
    Filter characters whose series name contains `series` (case-insensitive).

    Characters without a series never match.
    """
    return [
        character
        for character in characters
        if character.series is not None and contains_ignore_case(character.series, series)
    ]


def get_unique_series(characters: Iterable[Character]) -> List[str]:
    """Distinct series names, in the order they first appear."""
    seen = dict.fromkeys(
        character.series for character in characters if character.series is not None
    )
    return list(seen)


def get_average_power_level(characters: Iterable[Character]) -> int:
    """
    Calculate the average power level of characters.

    Args:
        characters: Characters to average

    Returns:
        Mean power level rounded half up, 0 for no characters
    """
    return rounded_mean(character.power_level for character in characters)


def find_characters_with_ability(characters: Iterable[Character], ability: str) -> List[Character]:
    """Filter characters having any ability that contains `ability` (case-insensitive)."""
    return [
        character
        for character in characters
        if any(contains_ignore_case(own, ability) for own in character.abilities)
    ]
