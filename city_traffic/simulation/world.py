"""Grid world that drives vehicles through the per-tick protocol."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..direction import Direction
from ..terrain import Light, Terrain
from ..vehicle import Vehicle

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TickSummary:
    """Headcount of the world after a tick."""

    tick: int
    alive: int
    dead: int

    @property
    def total(self) -> int:
        return self.alive + self.dead


class GridWorld:
    """Rectangular city map holding vehicles and a single signal state.

    Parameters
    ----------
    rows:
        Map rows as strings of terrain letters, north row first.
    vehicles:
        Vehicles to drive.  They are processed in the given order every tick.
    light:
        Signal shown at every light and crosswalk.  Callers may reassign
        :attr:`light` between ticks; the world never changes it on its own.
    """

    def __init__(
        self,
        rows: Sequence[str],
        vehicles: Iterable[Vehicle] = (),
        light: Light = Light.GREEN,
    ) -> None:
        if not rows or len({len(row) for row in rows}) != 1 or not rows[0]:
            raise ValueError("Map rows must be non-empty and of equal width")
        for row in rows:
            for letter in row:
                Terrain.from_letter(letter)
        self.grid: np.ndarray = np.array([list(row.upper()) for row in rows], dtype="<U1")
        self.vehicles: List[Vehicle] = list(vehicles)
        self.light = light
        self.tick_count = 0

    @property
    def height(self) -> int:
        return int(self.grid.shape[0])

    @property
    def width(self) -> int:
        return int(self.grid.shape[1])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def terrain_at(self, x: int, y: int) -> Optional[Terrain]:
        """Return the terrain at ``(x, y)`` or ``None`` off the map."""

        if not self.in_bounds(x, y):
            return None
        return Terrain(str(self.grid[y, x]))

    def light_at(self, x: int, y: int) -> Light:
        return self.light

    def neighbors(self, x: int, y: int) -> Dict[Direction, Terrain]:
        """Map each direction to the terrain next to ``(x, y)``.

        Directions leading off the map are left out.
        """

        result: Dict[Direction, Terrain] = {}
        for direction in Direction:
            terrain = self.terrain_at(x + direction.dx, y + direction.dy)
            if terrain is not None:
                result[direction] = terrain
        return result

    def occupancy(self) -> np.ndarray:
        """Return a ``(height, width)`` grid counting living vehicles per cell."""

        counts = np.zeros(self.grid.shape, dtype=int)
        for vehicle in self.vehicles:
            if vehicle.alive and self.in_bounds(vehicle.x, vehicle.y):
                counts[vehicle.y, vehicle.x] += 1
        return counts

    def _advance(self, vehicle: Vehicle) -> None:
        if not vehicle.alive:
            vehicle.poke()
            if vehicle.alive:
                logger.info("%s revived at (%d, %d)", vehicle.kind.value, vehicle.x, vehicle.y)
            return

        target_x = vehicle.x + vehicle.direction.dx
        target_y = vehicle.y + vehicle.direction.dy
        terrain = self.terrain_at(target_x, target_y)
        if terrain is not None and vehicle.can_pass(terrain, self.light_at(target_x, target_y)):
            vehicle.x = target_x
            vehicle.y = target_y
            return

        vehicle.direction = vehicle.choose_direction(self.neighbors(vehicle.x, vehicle.y))

    def _resolve_collisions(self) -> None:
        cells: Dict[Tuple[int, int], List[Vehicle]] = {}
        for vehicle in self.vehicles:
            cells.setdefault((vehicle.x, vehicle.y), []).append(vehicle)

        for occupants in cells.values():
            if len(occupants) < 2:
                continue
            was_alive = [vehicle.alive for vehicle in occupants]
            for first, second in combinations(occupants, 2):
                first.collide(second)
                second.collide(first)
            for vehicle, before in zip(occupants, was_alive):
                if before and not vehicle.alive:
                    logger.info("%s died at (%d, %d)", vehicle.kind.value, vehicle.x, vehicle.y)

    def tick(self) -> TickSummary:
        """Advance every vehicle by one tick and resolve collisions."""

        for vehicle in self.vehicles:
            self._advance(vehicle)
        self._resolve_collisions()
        self.tick_count += 1
        return self.summary()

    def summary(self) -> TickSummary:
        alive = sum(1 for vehicle in self.vehicles if vehicle.alive)
        return TickSummary(tick=self.tick_count, alive=alive, dead=len(self.vehicles) - alive)

    def reset(self) -> None:
        """Return every vehicle to its starting state and rewind the clock."""

        for vehicle in self.vehicles:
            vehicle.reset()
        self.tick_count = 0
