from pathlib import Path
import random
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from city_traffic.direction import Direction
from city_traffic.terrain import Light, Terrain


@pytest.mark.parametrize("direction", list(Direction))
def test_direction_algebra_holds_for_every_heading(direction):
    assert direction.reverse().reverse() is direction
    assert direction.left().right() is direction
    assert direction.right().left() is direction
    assert direction.left().left() is direction.reverse()
    assert direction.right().right() is direction.reverse()


def test_turns_follow_the_compass():
    assert Direction.NORTH.left() is Direction.WEST
    assert Direction.NORTH.right() is Direction.EAST
    assert Direction.EAST.reverse() is Direction.WEST
    assert Direction.SOUTH.left() is Direction.EAST


def test_offsets_point_south_for_growing_rows():
    assert (Direction.NORTH.dx, Direction.NORTH.dy) == (0, -1)
    assert (Direction.SOUTH.dx, Direction.SOUTH.dy) == (0, 1)
    assert (Direction.EAST.dx, Direction.EAST.dy) == (1, 0)
    assert (Direction.WEST.dx, Direction.WEST.dy) == (-1, 0)


def test_random_direction_uses_injected_source_and_covers_all_headings():
    rng = random.Random(1234)

    draws = {Direction.random(rng) for _ in range(200)}

    assert draws == set(Direction)


def test_random_direction_is_reproducible_with_the_same_seed():
    first = [Direction.random(random.Random(5)) for _ in range(3)]
    second = [Direction.random(random.Random(5)) for _ in range(3)]

    assert first == second


def test_terrain_parses_map_letters():
    assert Terrain.from_letter("S") is Terrain.STREET
    assert Terrain.from_letter("c") is Terrain.CROSSWALK
    assert Terrain.from_letter("W") is Terrain.WALL


def test_terrain_rejects_unknown_letters():
    with pytest.raises(ValueError):
        Terrain.from_letter("x")


def test_light_values_match_signal_names():
    assert Light("red") is Light.RED
    assert [light.value for light in Light] == ["red", "yellow", "green"]
