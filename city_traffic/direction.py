"""Compass directions used by vehicles on the city grid."""

from __future__ import annotations

from enum import Enum
import random
from typing import Optional


class Direction(Enum):
    """One of the four compass headings.

    Members are listed counter-clockwise so that turning left is a step forward
    in declaration order and turning right a step back.  ``y`` grows towards the
    south, matching the row order of a map.
    """

    NORTH = "N"
    WEST = "W"
    SOUTH = "S"
    EAST = "E"

    def _turn(self, steps: int) -> Direction:
        members = list(Direction)
        return members[(members.index(self) + steps) % len(members)]

    def left(self) -> Direction:
        """Return the heading after a quarter turn counter-clockwise."""

        return self._turn(1)

    def right(self) -> Direction:
        """Return the heading after a quarter turn clockwise."""

        return self._turn(-1)

    def reverse(self) -> Direction:
        return self._turn(2)

    @property
    def dx(self) -> int:
        return _OFFSETS[self][0]

    @property
    def dy(self) -> int:
        return _OFFSETS[self][1]

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> Direction:
        """Draw a heading uniformly at random.

        Parameters
        ----------
        rng:
            Random source to draw from.  Falls back to the module level
            generator which is neither seeded nor shared with the vehicles.
        """

        source = rng if rng is not None else random
        return source.choice(list(cls))


_OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.WEST: (-1, 0),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
}
