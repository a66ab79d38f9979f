"""
Dataset loader tests.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from anime_power import (
    SAMPLE_CHARACTERS,
    SAMPLE_SERIES,
    Config,
    DataLoadError,
    ValidationError,
    load_characters,
    load_dataset,
    load_series,
)
from anime_power.core.config import set_config

ROSTER_YAML = """\
characters:
  - name: Ichigo Kurosaki
    age: 15
    power_level: 8800
    abilities: [Getsuga Tensho, Bankai]
    series: Bleach
  - name: Saitama
    powerLevel: 12000
series:
  - title: Bleach
    genre: Action
    episodes: 366
    completed: true
    releaseYear: 2004
"""


@pytest.fixture
def roster(tmp_path: Path) -> Path:
    path = tmp_path / "roster.yaml"
    path.write_text(ROSTER_YAML)
    return path


class TestLoadCharacters:
    """Test character loading."""

    def test_yaml(self, roster: Path) -> None:
        """Loads records in file order, camelCase included."""
        characters = load_characters(roster)
        assert [c.name for c in characters] == ["Ichigo Kurosaki", "Saitama"]
        assert characters[0].abilities == ("Getsuga Tensho", "Bankai")
        assert characters[1].power_level == 12000
        assert characters[1].series is None

    def test_json(self, tmp_path: Path) -> None:
        """JSON files are read by suffix."""
        path = tmp_path / "roster.json"
        path.write_text(json.dumps({"characters": [c.to_dict() for c in SAMPLE_CHARACTERS]}))
        assert load_characters(path) == SAMPLE_CHARACTERS

    def test_missing_section(self, tmp_path: Path) -> None:
        """No characters section gives an empty tuple."""
        path = tmp_path / "series_only.yaml"
        path.write_text("series: []\n")
        assert load_characters(path) == ()

    def test_bad_record(self, tmp_path: Path) -> None:
        """Malformed records surface as ValidationError."""
        path = tmp_path / "bad.yaml"
        path.write_text("characters:\n  - name: Nobody\n    power_level: -10\n")
        with pytest.raises(ValidationError):
            load_characters(path)


class TestLoadSeries:
    """Test series loading."""

    def test_yaml(self, roster: Path) -> None:
        """Loads series records."""
        (bleach,) = load_series(roster)
        assert bleach.title == "Bleach"
        assert bleach.release_year == 2004


class TestLoadErrors:
    """Test file-level failures."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """Nonexistent path raises DataLoadError."""
        with pytest.raises(DataLoadError) as exc_info:
            load_characters(tmp_path / "nope.yaml")
        assert "nope.yaml" in exc_info.value.details["path"]

    @pytest.mark.parametrize("suffix", [".json", ".yaml"])
    def test_non_utf8_bytes(self, tmp_path: Path, suffix: str) -> None:
        """Undecodable bytes raise DataLoadError, not UnicodeDecodeError."""
        path = tmp_path / f"binary{suffix}"
        path.write_bytes(b'{"characters": [], "x": "\xff\xfe"}')
        with pytest.raises(DataLoadError) as exc_info:
            load_characters(path)
        assert exc_info.value.details["path"] == str(path)

    def test_unparseable(self, tmp_path: Path) -> None:
        """Broken JSON raises DataLoadError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(DataLoadError):
            load_series(path)

    def test_top_level_list(self, tmp_path: Path) -> None:
        """Top level must be a mapping."""
        path = tmp_path / "list.yaml"
        path.write_text("- name: Goku\n")
        with pytest.raises(DataLoadError):
            load_characters(path)

    def test_section_not_list(self, tmp_path: Path) -> None:
        """Sections must be lists."""
        path = tmp_path / "odd.yaml"
        path.write_text("series:\n  title: Bleach\n")
        with pytest.raises(DataLoadError) as exc_info:
            load_series(path)
        assert exc_info.value.details["section"] == "series"

    def test_empty_file(self, tmp_path: Path) -> None:
        """An empty file has no records."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_series(path) == ()


class TestLoadDataset:
    """Test configured dataset loading."""

    def test_sample_by_default(self) -> None:
        """No dataset path means the bundled sample."""
        characters, series = load_dataset(Config())
        assert characters is SAMPLE_CHARACTERS
        assert series is SAMPLE_SERIES

    def test_configured_path(self, roster: Path) -> None:
        """Reads both sections from the configured file."""
        cfg = Config.from_dict({"data": {"dataset_path": str(roster)}})
        characters, series = load_dataset(cfg)
        assert len(characters) == 2
        assert [s.title for s in series] == ["Bleach"]

    def test_uses_global_config(self, roster: Path) -> None:
        """Falls back to the global config."""
        set_config(Config.from_dict({"data": {"dataset_path": str(roster)}}))
        characters, _ = load_dataset()
        assert characters[0].name == "Ichigo Kurosaki"
