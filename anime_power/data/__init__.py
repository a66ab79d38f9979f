"""
Data
====

Bundled sample dataset and file loaders.
"""

from .sample import SAMPLE_CHARACTERS, SAMPLE_SERIES
from .loader import load_characters, load_series, load_dataset

__all__ = [
    "SAMPLE_CHARACTERS",
    "SAMPLE_SERIES",
    "load_characters",
    "load_series",
    "load_dataset",
]
