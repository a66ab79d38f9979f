"""
Power Ranking
=============

Maps a numeric power level onto a PowerLevel band.
"""

from typing import Optional

from ..core.config import RankingConfig
from ..models.power import PowerLevel

_DEFAULT_THRESHOLDS = RankingConfig()


def get_power_ranking(
    power_level: float,
    thresholds: Optional[RankingConfig] = None,
) -> PowerLevel:
    """
    Get the ranking band for a power value.

    Bands are checked from GODLIKE downwards; each lower bound is inclusive.

    Args:
        power_level: The power value
        thresholds: Band lower bounds (defaults to 10000/8000/5000/2000)

    Returns:
        The matching PowerLevel
    """
    thresholds = thresholds or _DEFAULT_THRESHOLDS

    if power_level >= thresholds.godlike:
        return PowerLevel.GODLIKE
    if power_level >= thresholds.legendary:
        return PowerLevel.LEGENDARY
    if power_level >= thresholds.strong:
        return PowerLevel.STRONG
    if power_level >= thresholds.moderate:
        return PowerLevel.MODERATE
    return PowerLevel.WEAK
