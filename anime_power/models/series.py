"""
Series Models
=============

Series records: an anime work with genre, episode count and completion status.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

from ..core.exceptions import ValidationError
from .validation import require_text, require_non_negative, optional_int, pick


@dataclass(frozen=True)
class Series:
    """An anime series."""

    title: str
    genre: str
    episodes: int
    completed: bool
    release_year: Optional[int] = None

    def __post_init__(self):
        require_text("title", self.title)
        require_text("genre", self.genre)
        require_non_negative("episodes", self.episodes)
        if not isinstance(self.episodes, int):
            raise ValidationError(
                "episodes must be an integer",
                field="episodes",
                value=self.episodes,
            )
        if not isinstance(self.completed, bool):
            raise ValidationError(
                "completed must be a boolean",
                field="completed",
                value=self.completed,
            )
        optional_int("release_year", self.release_year)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "title": self.title,
            "genre": self.genre,
            "episodes": self.episodes,
            "completed": self.completed,
            "release_year": self.release_year,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Series":
        """Create Series from dictionary (snake_case or camelCase keys)."""
        if not isinstance(data, dict):
            raise ValidationError("Series record must be a mapping", value=data)
        return cls(
            title=pick(data, "title", required=True),
            genre=pick(data, "genre", required=True),
            episodes=pick(data, "episodes", required=True),
            completed=pick(data, "completed", required=True),
            release_year=pick(data, "release_year", "releaseYear"),
        )
