"""Rules for motor vehicles that stay on the road network."""

from __future__ import annotations

import logging
import random

from .base import ROAD_TERRAIN, MovementRules, Neighbors, first_matching, forward_candidates
from ..direction import Direction
from ..terrain import Light, Terrain

logger = logging.getLogger(__name__)


class CarRules(MovementRules):
    """Law-abiding car: stops on red, only crosses a crosswalk on green."""

    death_time = 15

    def can_pass(self, terrain: Terrain, light: Light) -> bool:
        if terrain is Terrain.STREET:
            return True
        if terrain is Terrain.LIGHT:
            return light is not Light.RED
        if terrain is Terrain.CROSSWALK:
            return light is Light.GREEN
        return False

    def choose_direction(
        self, heading: Direction, neighbors: Neighbors, rng: random.Random
    ) -> Direction:
        chosen = first_matching(neighbors, forward_candidates(heading), ROAD_TERRAIN)
        return chosen if chosen is not None else heading.reverse()


class TaxiRules(MovementRules):
    """Taxi that eventually runs a red crosswalk after waiting a few ticks."""

    death_time = 15
    red_wait_ticks = 3

    def __init__(self) -> None:
        self.wait_counter = 0

    def evaluate_crosswalk(self, light: Light) -> bool:
        """Decide whether to enter a crosswalk, counting red-light waits.

        Green and yellow always pass without touching the wait counter.  On
        red the counter advances and the taxi passes on the query that brings
        it to :attr:`red_wait_ticks`, which also clears it.  Every call on red
        counts as one tick of waiting, so call this at most once per decision.
        """

        if light is not Light.RED:
            return True
        self.wait_counter += 1
        if self.wait_counter >= self.red_wait_ticks:
            logger.debug("Taxi done waiting after %d red ticks", self.wait_counter)
            self.wait_counter = 0
            return True
        return False

    def can_pass(self, terrain: Terrain, light: Light) -> bool:
        if terrain is Terrain.STREET:
            return True
        if terrain is Terrain.LIGHT:
            return light is not Light.RED
        if terrain is Terrain.CROSSWALK:
            return self.evaluate_crosswalk(light)
        return False

    def choose_direction(
        self, heading: Direction, neighbors: Neighbors, rng: random.Random
    ) -> Direction:
        chosen = first_matching(neighbors, forward_candidates(heading), ROAD_TERRAIN)
        return chosen if chosen is not None else heading.reverse()

    def reset(self) -> None:
        self.wait_counter = 0


class TruckRules(MovementRules):
    """Truck that ignores traffic lights and turns unpredictably."""

    death_time = 0

    def can_pass(self, terrain: Terrain, light: Light) -> bool:
        if terrain in (Terrain.STREET, Terrain.LIGHT):
            return True
        if terrain is Terrain.CROSSWALK:
            return light is not Light.RED
        return False

    def choose_direction(
        self, heading: Direction, neighbors: Neighbors, rng: random.Random
    ) -> Direction:
        candidates = list(forward_candidates(heading))
        rng.shuffle(candidates)
        chosen = first_matching(neighbors, candidates, ROAD_TERRAIN)
        return chosen if chosen is not None else heading.reverse()
