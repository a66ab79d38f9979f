"""
Sample Data
===========

Fixed sample dataset. Tuples, so the constants cannot be modified.
"""

from typing import Tuple

from ..models.character import Character
from ..models.series import Series


SAMPLE_CHARACTERS: Tuple[Character, ...] = (
    Character(
        name="Son Goku",
        age=30,
        power_level=9000,
        abilities=("Kamehameha", "Super Saiyan", "Instant Transmission"),
        series="Dragon Ball",
    ),
    Character(
        name="Vegeta",
        age=32,
        power_level=8500,
        abilities=("Final Flash", "Super Saiyan", "Galick Gun"),
        series="Dragon Ball",
    ),
    Character(
        name="Naruto Uzumaki",
        age=17,
        power_level=7500,
        abilities=("Rasengan", "Shadow Clone Jutsu", "Sage Mode"),
        series="Naruto",
    ),
    Character(
        name="Sasuke Uchiha",
        age=17,
        power_level=8000,
        abilities=("Chidori", "Sharingan", "Rinnegan"),
        series="Naruto",
    ),
)


SAMPLE_SERIES: Tuple[Series, ...] = (
    Series(
        title="Dragon Ball",
        genre="Action",
        episodes=153,
        completed=True,
        release_year=1986,
    ),
    Series(
        title="Naruto",
        genre="Action",
        episodes=220,
        completed=True,
        release_year=2002,
    ),
    Series(
        title="One Piece",
        genre="Adventure",
        episodes=1100,
        completed=False,
        release_year=1999,
    ),
)
