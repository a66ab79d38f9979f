import pytest

from anime_power import Character, Series
from anime_power.core.config import reset_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from config files in the cwd or home directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    reset_config()
    yield
    reset_config()


@pytest.fixture
def characters() -> list[Character]:
    return [
        Character(name="Krillin", power_level=1500, abilities=("Destructo Disc",), series="Dragon Ball Z"),
        Character(name="Gohan", power_level=8000, abilities=("Masenko", "Kamehameha"), series="Dragon Ball Z"),
        Character(name="Ichigo", power_level=8000, abilities=("Getsuga Tensho",), series="Bleach"),
        Character(name="Saitama", power_level=12000, abilities=()),
        Character(name="Rukia", power_level=4000, abilities=("Sode no Shirayuki",), series="Bleach"),
    ]


@pytest.fixture
def series() -> list[Series]:
    return [
        Series(title="Bleach", genre="Action", episodes=366, completed=True, release_year=2004),
        Series(title="Mushishi", genre="Slice of Life", episodes=26, completed=True),
        Series(title="Detective Conan", genre="Mystery", episodes=1100, completed=False),
        Series(title="One Piece", genre="Action Adventure", episodes=1100, completed=False),
    ]
