"""Movement rule abstractions shared by every vehicle kind."""

from __future__ import annotations

from abc import ABC, abstractmethod
import random
from typing import Iterable, Mapping, Optional, Tuple

from ..direction import Direction
from ..terrain import Light, Terrain

Neighbors = Mapping[Direction, Terrain]

ROAD_TERRAIN = frozenset({Terrain.STREET, Terrain.LIGHT, Terrain.CROSSWALK})


def forward_candidates(heading: Direction) -> Tuple[Direction, Direction, Direction]:
    """Return the straight, left and right headings, in that order."""

    return heading, heading.left(), heading.right()


def first_matching(
    neighbors: Neighbors,
    candidates: Iterable[Direction],
    accepted: Iterable[Terrain],
) -> Optional[Direction]:
    """Return the first candidate whose neighbouring terrain is accepted.

    Directions missing from ``neighbors`` never match.
    """

    accepted = frozenset(accepted)
    for direction in candidates:
        if neighbors.get(direction) in accepted:
            return direction
    return None


class MovementRules(ABC):
    """Passability and steering policy for one vehicle kind.

    Each vehicle owns its own rules instance so that any per-vehicle rule
    state stays private to that vehicle.
    """

    death_time: int = 0

    @abstractmethod
    def can_pass(self, terrain: Terrain, light: Light) -> bool:
        """Return whether the vehicle may enter ``terrain`` under ``light``."""

    @abstractmethod
    def choose_direction(
        self, heading: Direction, neighbors: Neighbors, rng: random.Random
    ) -> Direction:
        """Pick a new heading given the terrain around the vehicle."""

    def reset(self) -> None:
        """Forget any state accumulated since construction."""

        return None
