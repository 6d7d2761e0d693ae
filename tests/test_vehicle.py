from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from city_traffic.direction import Direction
from city_traffic.rules import TaxiRules
from city_traffic.terrain import Light, Terrain
from city_traffic.vehicle import Vehicle, VehicleKind


class FixedRandom:
    """Random source whose choices always return a fixed heading."""

    def __init__(self, heading: Direction) -> None:
        self.heading = heading

    def choice(self, seq):
        assert self.heading in seq
        return self.heading

    def shuffle(self, items) -> None:
        return None


def make(kind: VehicleKind, x: int = 10, y: int = 20, direction: Direction = Direction.NORTH, **kwargs):
    return Vehicle(kind, x, y, direction, **kwargs)


def kill(vehicle: Vehicle) -> None:
    """Put ``vehicle`` into the dead state through a collision it loses."""

    vehicle.collide(make(VehicleKind.TRUCK))
    assert not vehicle.alive


@pytest.mark.parametrize(
    "kind,death_time",
    [
        (VehicleKind.ATV, 25),
        (VehicleKind.BICYCLE, 35),
        (VehicleKind.CAR, 15),
        (VehicleKind.HUMAN, 45),
        (VehicleKind.TAXI, 15),
        (VehicleKind.TRUCK, 0),
    ],
)
def test_new_vehicle_is_alive_at_its_starting_cell(kind, death_time):
    vehicle = make(kind)

    assert (vehicle.x, vehicle.y, vehicle.direction) == (10, 20, Direction.NORTH)
    assert vehicle.alive
    assert vehicle.death_counter == 0
    assert vehicle.death_time == death_time


def test_kind_accepts_its_lowercase_name():
    assert make("taxi").kind is VehicleKind.TAXI


def test_construction_requires_a_direction():
    with pytest.raises(ValueError):
        Vehicle(VehicleKind.CAR, 0, 0, None)
    with pytest.raises(ValueError):
        Vehicle(VehicleKind.CAR, 0, 0, "NORTH")


def test_each_vehicle_gets_its_own_rules():
    first = make(VehicleKind.TAXI)
    second = make(VehicleKind.TAXI)

    first.can_pass(Terrain.CROSSWALK, Light.RED)

    assert isinstance(first.rules, TaxiRules)
    assert first.rules is not second.rules
    assert second.rules.wait_counter == 0


def test_collision_loser_is_the_slower_recovering_vehicle():
    car = make(VehicleKind.CAR)
    truck = make(VehicleKind.TRUCK)

    truck.collide(car)
    assert truck.alive

    car.collide(truck)
    assert not car.alive
    assert truck.alive


def test_collision_is_one_sided_and_needs_both_alive():
    human = make(VehicleKind.HUMAN)
    bicycle = make(VehicleKind.BICYCLE)
    kill(bicycle)

    human.collide(bicycle)

    assert human.alive


def test_equal_death_times_do_not_kill():
    car = make(VehicleKind.CAR)
    taxi = make(VehicleKind.TAXI)

    car.collide(taxi)
    taxi.collide(car)

    assert car.alive and taxi.alive


def test_poke_is_a_no_op_while_alive():
    car = make(VehicleKind.CAR, direction=Direction.EAST)

    for _ in range(50):
        car.poke()

    assert car.alive
    assert car.death_counter == 0
    assert car.direction is Direction.EAST


def test_revives_after_exactly_death_time_pokes():
    car = make(VehicleKind.CAR, rng=FixedRandom(Direction.WEST))
    kill(car)

    for expected in range(1, car.death_time):
        car.poke()
        assert not car.alive
        assert car.death_counter == expected

    car.poke()

    assert car.alive
    assert car.death_counter == 0
    assert car.direction is Direction.WEST


def test_truck_revives_on_first_poke():
    truck = make(VehicleKind.TRUCK, rng=FixedRandom(Direction.SOUTH))
    truck._alive = False

    truck.poke()

    assert truck.alive
    assert truck.death_counter == 0
    assert truck.direction is Direction.SOUTH


def test_truck_never_loses_a_collision():
    truck = make(VehicleKind.TRUCK)

    for kind in VehicleKind:
        truck.collide(make(kind))

    assert truck.alive


def test_reset_restores_snapshot_after_any_mutation():
    taxi = make(VehicleKind.TAXI, x=3, y=4, direction=Direction.SOUTH)
    taxi.x = 9
    taxi.y = 1
    taxi.direction = Direction.WEST
    taxi.can_pass(Terrain.CROSSWALK, Light.RED)
    taxi.collide(make(VehicleKind.TRUCK))
    taxi.poke()

    taxi.reset()

    assert (taxi.x, taxi.y, taxi.direction) == (3, 4, Direction.SOUTH)
    assert taxi.alive
    assert taxi.death_counter == 0
    assert taxi.rules.wait_counter == 0


def test_image_name_tracks_alive_state():
    human = make(VehicleKind.HUMAN)
    assert human.image_name == "human.gif"

    kill(human)

    assert human.image_name == "human_dead.gif"


def test_string_form_reports_position_heading_and_status():
    atv = make(VehicleKind.ATV, x=2, y=5, direction=Direction.EAST)
    assert str(atv) == "Atv at (2, 5), facing EAST, alive"

    kill(atv)

    assert str(atv).endswith("dead")


def test_choose_direction_uses_current_heading_and_rng():
    car = make(VehicleKind.CAR, direction=Direction.EAST)
    neighbors = {Direction.EAST: Terrain.WALL, Direction.NORTH: Terrain.STREET}

    assert car.choose_direction(neighbors) is Direction.NORTH

    atv = make(VehicleKind.ATV, direction=Direction.EAST, rng=FixedRandom(Direction.NORTH))
    assert atv.choose_direction({Direction.NORTH: Terrain.GRASS}) is Direction.NORTH


def test_atv_attempt_budget_is_forwarded_to_rules():
    atv = make(VehicleKind.ATV, max_direction_attempts=3)

    assert atv.rules.max_attempts == 3
