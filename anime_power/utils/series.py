"""
Series Queries
==============

Pure filter and aggregation functions over series records.
"""

import logging
from typing import Iterable, List, Optional

from ..models.series import Series
from .matching import contains_ignore_case
from .numbers import rounded_mean

logger = logging.getLogger(__name__)


def get_completed_series(series: Iterable[Series]) -> List[Series]:
    """Filter series that have finished airing."""
    return [s for s in series if s.completed]


def get_average_episodes(series: Iterable[Series]) -> int:
    """
    Get the average episode count.

    Args:
        series: Series to average

    Returns:
        Mean episode count rounded half up, 0 for no series
    """
    return rounded_mean(s.episodes for s in series)


def get_series_by_genre(series: Iterable[Series], genre: str) -> List[Series]:
    """Filter series whose genre contains `genre` (case-insensitive)."""
    return [s for s in series if contains_ignore_case(s.genre, genre)]


def get_longest_series(series: Iterable[Series]) -> Optional[Series]:
    """
    Get the series with the most episodes.

    Ties go to the series seen first.

    Args:
        series: Series to search

    Returns:
        The longest series, or None if there are none
    """
    longest: Optional[Series] = None
    for s in series:
        if longest is None or s.episodes > longest.episodes:
            longest = s

    if longest is None:
        logger.debug("get_longest_series called with no series")
    return longest
