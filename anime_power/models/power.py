"""
Power Levels
============

Qualitative power ranking bands.
"""

from enum import Enum


class PowerLevel(Enum):
    """Power ranking, ordered WEAK < MODERATE < STRONG < LEGENDARY < GODLIKE."""

    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"
    LEGENDARY = "legendary"
    GODLIKE = "godlike"

    @property
    def rank(self) -> int:
        """Position of this band, 0 for WEAK up to 4 for GODLIKE."""
        return list(PowerLevel).index(self)

    def __lt__(self, other):
        if not isinstance(other, PowerLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, PowerLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, PowerLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, PowerLevel):
            return NotImplemented
        return self.rank >= other.rank
