#!/usr/bin/env python3
"""
Power Report Example
====================

Prints a short report over the configured dataset (the sample data unless
an anime_power.yaml points `data.dataset_path` at a file).
"""

from pathlib import Path

# Add project root to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from anime_power import (
    VERSION,
    configure_logging,
    load_dataset,
    calculate_total_power,
    get_average_power_level,
    sort_characters_by_power,
    get_power_ranking,
    get_unique_series,
    get_characters_by_series,
    get_completed_series,
    get_average_episodes,
    get_longest_series,
)


def main():
    """Print character and series summaries."""
    configure_logging()
    characters, series = load_dataset()

    print(f"=== Anime Power {VERSION} ===")

    print("\nCharacters (strongest first):")
    for character in sort_characters_by_power(characters):
        ranking = get_power_ranking(character.power_level)
        print(f"  {character.name:<16} {character.power_level:>6}  {ranking.value}")

    print(f"\nTotal power:   {calculate_total_power(characters)}")
    print(f"Average power: {get_average_power_level(characters)}")

    print("\nBy series:")
    for name in get_unique_series(characters):
        members = ", ".join(c.name for c in get_characters_by_series(characters, name))
        print(f"  {name}: {members}")

    print(f"\nCompleted series: {[s.title for s in get_completed_series(series)]}")
    print(f"Average episodes: {get_average_episodes(series)}")

    longest = get_longest_series(series)
    if longest:
        print(f"Longest series:   {longest.title} ({longest.episodes} episodes)")


if __name__ == "__main__":
    main()
