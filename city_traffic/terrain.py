"""Cell classifications and signal states provided by the city map."""

from __future__ import annotations

from enum import Enum


class Terrain(Enum):
    """Static classification of a grid cell, keyed by its map letter."""

    STREET = "S"
    LIGHT = "L"
    CROSSWALK = "C"
    TRAIL = "T"
    GRASS = "G"
    WALL = "W"

    @classmethod
    def from_letter(cls, letter: str) -> Terrain:
        try:
            return cls(letter.upper())
        except ValueError:
            raise ValueError(f"Unknown terrain letter {letter!r}") from None


class Light(Enum):
    """Signal state shown at ``LIGHT`` and ``CROSSWALK`` cells."""

    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
