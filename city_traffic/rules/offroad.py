"""Rules for vehicles and pedestrians that leave the street grid."""

from __future__ import annotations

import logging
import random

from .base import ROAD_TERRAIN, MovementRules, Neighbors, first_matching, forward_candidates
from ..direction import Direction
from ..terrain import Light, Terrain

logger = logging.getLogger(__name__)

DEFAULT_MAX_DIRECTION_ATTEMPTS = 64


class AtvRules(MovementRules):
    """All-terrain vehicle that goes anywhere but walls, in random directions."""

    death_time = 25

    def __init__(self, max_attempts: int = DEFAULT_MAX_DIRECTION_ATTEMPTS) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts

    def can_pass(self, terrain: Terrain, light: Light) -> bool:
        return terrain is not Terrain.WALL

    def choose_direction(
        self, heading: Direction, neighbors: Neighbors, rng: random.Random
    ) -> Direction:
        """Sample headings until one neither reverses nor faces a wall.

        A missing neighbour counts as impassable.  When no acceptable heading
        turns up within :attr:`max_attempts` draws the ATV turns around.
        """

        reverse = heading.reverse()
        for _ in range(self.max_attempts):
            candidate = Direction.random(rng)
            terrain = neighbors.get(candidate)
            if candidate is not reverse and terrain is not None and terrain is not Terrain.WALL:
                return candidate
        logger.warning(
            "ATV found no open heading from %s after %d attempts, reversing",
            heading.name,
            self.max_attempts,
        )
        return reverse


class BicycleRules(MovementRules):
    """Bicycle that prefers trails and waits for green at lights."""

    death_time = 35

    def can_pass(self, terrain: Terrain, light: Light) -> bool:
        if terrain in (Terrain.STREET, Terrain.TRAIL):
            return True
        if terrain in (Terrain.LIGHT, Terrain.CROSSWALK):
            return light is Light.GREEN
        return False

    def choose_direction(
        self, heading: Direction, neighbors: Neighbors, rng: random.Random
    ) -> Direction:
        candidates = forward_candidates(heading)
        chosen = first_matching(neighbors, candidates, (Terrain.TRAIL,))
        if chosen is None:
            chosen = first_matching(neighbors, candidates, ROAD_TERRAIN)
        return chosen if chosen is not None else heading.reverse()


class HumanRules(MovementRules):
    """Pedestrian who walks on grass and crosses only against the light."""

    death_time = 45

    def can_pass(self, terrain: Terrain, light: Light) -> bool:
        if terrain is Terrain.GRASS:
            return True
        if terrain is Terrain.CROSSWALK:
            return light is not Light.GREEN
        return False

    def choose_direction(
        self, heading: Direction, neighbors: Neighbors, rng: random.Random
    ) -> Direction:
        candidates = list(forward_candidates(heading))
        chosen = first_matching(neighbors, candidates, (Terrain.CROSSWALK,))
        if chosen is None:
            rng.shuffle(candidates)
            chosen = first_matching(neighbors, candidates, (Terrain.GRASS, Terrain.CROSSWALK))
        return chosen if chosen is not None else heading.reverse()
