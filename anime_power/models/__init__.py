"""
Models
======

Immutable record types and the power ranking enumeration.
"""

from .power import PowerLevel
from .character import Character
from .series import Series

__all__ = [
    "PowerLevel",
    "Character",
    "Series",
]
