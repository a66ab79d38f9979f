"""
Dataset Loading
===============

Read-only loading of character and series records from YAML or JSON files.

Expected file layout:

    characters:
      - name: Son Goku
        power_level: 9000
        abilities: [Kamehameha]
        series: Dragon Ball
    series:
      - title: Dragon Ball
        genre: Action
        episodes: 153
        completed: true
"""

import json
import logging
from pathlib import Path
from typing import Optional, Tuple, Dict, Any, List, Union

import yaml

from ..core.config import Config, get_config
from ..core.exceptions import DataLoadError
from ..models.character import Character
from ..models.series import Series
from .sample import SAMPLE_CHARACTERS, SAMPLE_SERIES

logger = logging.getLogger(__name__)


def _read_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Parse a dataset file into its top-level mapping."""
    path = Path(path)

    if not path.exists():
        raise DataLoadError(f"Dataset file not found: {path}", path=str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DataLoadError(f"Failed to parse dataset {path}: {e}", path=str(path))
    except OSError as e:
        raise DataLoadError(f"Failed to read dataset {path}: {e}", path=str(path))

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DataLoadError(
            f"Dataset {path} must contain a mapping at the top level",
            path=str(path),
        )
    return data


def _section(data: Dict[str, Any], name: str, path: Union[str, Path]) -> List[Any]:
    """Return a list section of the dataset, empty when absent."""
    records = data.get(name)
    if records is None:
        return []
    if not isinstance(records, list):
        raise DataLoadError(
            f"Section '{name}' in {path} must be a list",
            path=str(path),
            section=name,
        )
    return records


def load_characters(path: Union[str, Path]) -> Tuple[Character, ...]:
    """
    Load characters from a dataset file.

    Args:
        path: YAML (.yaml/.yml) or JSON file

    Returns:
        Characters in file order
    """
    data = _read_file(path)
    characters = tuple(Character.from_dict(record) for record in _section(data, "characters", path))
    logger.info(f"Loaded {len(characters)} characters from {path}")
    return characters


def load_series(path: Union[str, Path]) -> Tuple[Series, ...]:
    """
    Load series from a dataset file.

    Args:
        path: YAML (.yaml/.yml) or JSON file

    Returns:
        Series in file order
    """
    data = _read_file(path)
    series = tuple(Series.from_dict(record) for record in _section(data, "series", path))
    logger.info(f"Loaded {len(series)} series from {path}")
    return series


def load_dataset(
    config: Optional[Config] = None,
) -> Tuple[Tuple[Character, ...], Tuple[Series, ...]]:
    """
    Load the configured dataset.

    Falls back to the sample data when no dataset path is configured.

    Args:
        config: Configuration to use (defaults to the global config)

    Returns:
        (characters, series)
    """
    config = config or get_config()
    path = config.data.dataset_path

    if not path:
        logger.debug("No dataset configured, using sample data")
        return SAMPLE_CHARACTERS, SAMPLE_SERIES

    data = _read_file(path)
    characters = tuple(Character.from_dict(record) for record in _section(data, "characters", path))
    series = tuple(Series.from_dict(record) for record in _section(data, "series", path))
    logger.info(f"Loaded {len(characters)} characters and {len(series)} series from {path}")
    return characters, series
