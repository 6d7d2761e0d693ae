"""Vehicle state machine shared by every kind of traffic participant."""

from __future__ import annotations

from enum import Enum
import logging
import random
from typing import Callable, Dict, Optional

from .direction import Direction
from .rules import (
    AtvRules,
    BicycleRules,
    CarRules,
    HumanRules,
    MovementRules,
    Neighbors,
    TaxiRules,
    TruckRules,
)
from .rules.offroad import DEFAULT_MAX_DIRECTION_ATTEMPTS
from .terrain import Light, Terrain

logger = logging.getLogger(__name__)


class VehicleKind(Enum):
    """Tag selecting which movement rules a vehicle follows."""

    ATV = "atv"
    BICYCLE = "bicycle"
    CAR = "car"
    HUMAN = "human"
    TAXI = "taxi"
    TRUCK = "truck"


RULES_FACTORIES: Dict[VehicleKind, Callable[[int], MovementRules]] = {
    VehicleKind.ATV: lambda attempts: AtvRules(max_attempts=attempts),
    VehicleKind.BICYCLE: lambda attempts: BicycleRules(),
    VehicleKind.CAR: lambda attempts: CarRules(),
    VehicleKind.HUMAN: lambda attempts: HumanRules(),
    VehicleKind.TAXI: lambda attempts: TaxiRules(),
    VehicleKind.TRUCK: lambda attempts: TruckRules(),
}


def build_rules(
    kind: VehicleKind, max_direction_attempts: int = DEFAULT_MAX_DIRECTION_ATTEMPTS
) -> MovementRules:
    """Instantiate a fresh rules object for ``kind``."""

    return RULES_FACTORIES[kind](max_direction_attempts)


class Vehicle:
    """A traffic participant moving across the city grid.

    The vehicle owns its position, heading and life cycle.  Dead vehicles stay
    in place and are revived by :meth:`poke` once they have waited
    :attr:`death_time` ticks.  Kind specific decisions are delegated to
    :attr:`rules`.

    Parameters
    ----------
    kind:
        Which rules the vehicle follows.
    x, y:
        Starting grid coordinates.  Bounds are the world's concern.
    direction:
        Starting heading.
    rng:
        Random source for revival headings and randomised steering.  A private
        unseeded generator is created when omitted.
    max_direction_attempts:
        Sampling budget for kinds that pick headings by rejection sampling.
    """

    def __init__(
        self,
        kind: VehicleKind,
        x: int,
        y: int,
        direction: Direction,
        rng: Optional[random.Random] = None,
        max_direction_attempts: int = DEFAULT_MAX_DIRECTION_ATTEMPTS,
    ) -> None:
        if not isinstance(direction, Direction):
            raise ValueError(f"direction must be a Direction, got {direction!r}")
        self.kind = VehicleKind(kind)
        self.rules = build_rules(self.kind, max_direction_attempts)
        self.rng = rng if rng is not None else random.Random()

        self.x = x
        self.y = y
        self.direction = direction
        self.initial_x = x
        self.initial_y = y
        self.initial_direction = direction

        self._alive = True
        self._death_counter = 0

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def death_time(self) -> int:
        return self.rules.death_time

    @property
    def death_counter(self) -> int:
        return self._death_counter

    @property
    def image_name(self) -> str:
        """File name the renderer should use for this vehicle's sprite."""

        suffix = ".gif" if self._alive else "_dead.gif"
        return self.kind.value + suffix

    def can_pass(self, terrain: Terrain, light: Light) -> bool:
        return self.rules.can_pass(terrain, light)

    def choose_direction(self, neighbors: Neighbors) -> Direction:
        return self.rules.choose_direction(self.direction, neighbors, self.rng)

    def poke(self) -> None:
        """Advance the death counter, reviving once the wait is over."""

        if self._alive:
            return
        self._death_counter += 1
        if self._death_counter >= self.death_time:
            self._revive()

    def _revive(self) -> None:
        self._alive = True
        self._death_counter = 0
        self.direction = Direction.random(self.rng)
        logger.debug("%s revived heading %s", self.kind.value, self.direction.name)

    def collide(self, other: Vehicle) -> None:
        """Resolve this vehicle's side of a collision with ``other``.

        The vehicle with the longer death time loses.  Only this vehicle's
        state changes, so the caller must also invoke ``other.collide(self)``.
        """

        if self._alive and other.alive and self.death_time > other.death_time:
            self._alive = False
            logger.debug(
                "%s at (%d, %d) lost a collision with %s",
                self.kind.value,
                self.x,
                self.y,
                other.kind.value,
            )

    def reset(self) -> None:
        """Return to the construction time position, heading and health."""

        self.x = self.initial_x
        self.y = self.initial_y
        self.direction = self.initial_direction
        self._alive = True
        self._death_counter = 0
        self.rules.reset()

    def __str__(self) -> str:
        status = "alive" if self._alive else "dead"
        return (
            f"{self.kind.name.capitalize()} at ({self.x}, {self.y}), "
            f"facing {self.direction.name}, {status}"
        )

    def __repr__(self) -> str:
        return (
            f"Vehicle(kind={self.kind.name}, x={self.x}, y={self.y}, "
            f"direction={self.direction.name}, alive={self._alive})"
        )
