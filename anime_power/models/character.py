"""
Character Models
================

Character records: a named fighter with a numeric power level.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Dict, Any

from ..core.exceptions import ValidationError
from .validation import (
    require_text,
    optional_text,
    require_non_negative,
    optional_int,
    pick,
)


@dataclass(frozen=True)
class Character:
    """
    A character with a power level and abilities.

    `series` associates the character with a Series by title; nothing
    checks that such a series exists.
    """

    name: str
    power_level: float
    abilities: Tuple[str, ...] = field(default_factory=tuple)
    age: Optional[int] = None
    series: Optional[str] = None

    def __post_init__(self):
        require_text("name", self.name)
        require_non_negative("power_level", self.power_level)
        optional_int("age", self.age)
        optional_text("series", self.series)

        if isinstance(self.abilities, str):
            raise ValidationError(
                "abilities must be a sequence of strings, not a string",
                field="abilities",
                value=self.abilities,
            )
        try:
            abilities = tuple(self.abilities)
        except TypeError:
            raise ValidationError(
                "abilities must be a sequence of strings",
                field="abilities",
                value=self.abilities,
            )
        for ability in abilities:
            if not isinstance(ability, str):
                raise ValidationError(
                    "abilities must contain only strings",
                    field="abilities",
                    value=ability,
                )
        object.__setattr__(self, "abilities", abilities)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "age": self.age,
            "power_level": self.power_level,
            "abilities": list(self.abilities),
            "series": self.series,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Character":
        """Create Character from dictionary (snake_case or camelCase keys)."""
        if not isinstance(data, dict):
            raise ValidationError("Character record must be a mapping", value=data)
        return cls(
            name=pick(data, "name", required=True),
            power_level=pick(data, "power_level", "powerLevel", required=True),
            abilities=pick(data, "abilities") or (),
            age=pick(data, "age"),
            series=pick(data, "series"),
        )
