"""
Field checks shared by the record models.

Each helper returns the value unchanged or raises ValidationError.
"""

import math
from numbers import Real
from typing import Any, Dict, Optional

from ..core.exceptions import ValidationError


def require_text(field: str, value: Any) -> str:
    """
    Require a non-empty string.

    Stricter than a bare string type: an empty name, title or genre is
    rejected, since it can never be matched or displayed meaningfully.
    """
    if not isinstance(value, str) or not value:
        raise ValidationError(
            f"{field} must be a non-empty string",
            field=field,
            value=value,
            constraint="non-empty string",
        )
    return value


def optional_text(field: str, value: Any) -> Optional[str]:
    """Allow None or a string."""
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field} must be a string", field=field, value=value)
    return value


def require_non_negative(field: str, value: Any) -> Real:
    """Require a finite real number >= 0 (bools, inf and nan are rejected)."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{field} must be a number", field=field, value=value)
    if not math.isfinite(value):
        raise ValidationError(
            f"{field} must be finite, got {value}",
            field=field,
            value=value,
            constraint="finite",
        )
    if value < 0:
        raise ValidationError(
            f"{field} must be non-negative, got {value}",
            field=field,
            value=value,
            constraint=">= 0",
        )
    return value


def optional_int(field: str, value: Any) -> Optional[int]:
    """Allow None or an integer (bools are rejected)."""
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValidationError(f"{field} must be an integer", field=field, value=value)
    return value


def pick(data: Dict[str, Any], *keys: str, required: bool = False) -> Any:
    """
    Return the first of `keys` present in `data`.

    Lets records load both snake_case and camelCase payloads.
    """
    for key in keys:
        if key in data:
            return data[key]
    if required:
        raise ValidationError(f"Missing required field: {keys[0]}", field=keys[0])
    return None
