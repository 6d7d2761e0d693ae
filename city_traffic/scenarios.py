"""Predefined city layouts for the traffic simulation."""
from __future__ import annotations

from dataclasses import dataclass
import random
from typing import Dict, List, Optional, Tuple

from .direction import Direction
from .rules.offroad import DEFAULT_MAX_DIRECTION_ATTEMPTS
from .simulation.world import GridWorld
from .terrain import Light, Terrain
from .vehicle import Vehicle, VehicleKind


@dataclass(frozen=True)
class VehiclePlacement:
    """Starting cell and heading of one vehicle in a scenario."""

    kind: VehicleKind
    x: int
    y: int
    direction: Direction


@dataclass(frozen=True)
class CityScenario:
    """A small city map with vehicles placed on it.

    ``rows`` spell the map one terrain letter per cell, north row first.
    """

    name: str
    description: str
    rows: Tuple[str, ...]
    placements: Tuple[VehiclePlacement, ...]
    light: Light = Light.GREEN

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.rows:
            raise ValueError("A scenario must contain at least one row")
        width = len(self.rows[0])
        if width == 0 or any(len(row) != width for row in self.rows):
            raise ValueError("All scenario rows must have the same non-zero width")
        for row in self.rows:
            for letter in row:
                Terrain.from_letter(letter)
        for placement in self.placements:
            if not (0 <= placement.x < width and 0 <= placement.y < len(self.rows)):
                raise ValueError(
                    f"{placement.kind.value} placed at ({placement.x}, {placement.y}) "
                    f"is outside the {width}x{len(self.rows)} map"
                )

    def build_vehicles(
        self,
        rng: Optional[random.Random] = None,
        max_direction_attempts: int = DEFAULT_MAX_DIRECTION_ATTEMPTS,
    ) -> List[Vehicle]:
        return [
            Vehicle(
                placement.kind,
                placement.x,
                placement.y,
                placement.direction,
                rng=rng,
                max_direction_attempts=max_direction_attempts,
            )
            for placement in self.placements
        ]

    def build_world(
        self,
        rng: Optional[random.Random] = None,
        max_direction_attempts: int = DEFAULT_MAX_DIRECTION_ATTEMPTS,
        light: Optional[Light] = None,
    ) -> GridWorld:
        """Create a fresh world populated with this scenario's vehicles."""

        vehicles = self.build_vehicles(rng, max_direction_attempts)
        return GridWorld(self.rows, vehicles, light=light if light is not None else self.light)


def _place(kind: VehicleKind, x: int, y: int, direction: Direction) -> VehiclePlacement:
    return VehiclePlacement(kind=kind, x=x, y=y, direction=direction)


def load_predefined_scenarios() -> List[CityScenario]:
    """Return curated scenarios that exercise every vehicle kind."""

    downtown = CityScenario(
        name="downtown",
        description=(
            "A ring road with a signalised crossing, a park trail through the "
            "middle and pedestrians on the lawns. Every vehicle kind appears."
        ),
        rows=(
            "WWWWWWWWWWWW",
            "WSSSSLSSSSSW",
            "WSGGGCGGGGSW",
            "WSGTTTTTTGSW",
            "WSGGGCGGGGSW",
            "WLSSSLSSSSLW",
            "WSGGGCGGGGSW",
            "WSSSSLSSSSSW",
            "WWWWWWWWWWWW",
        ),
        placements=(
            _place(VehicleKind.CAR, 2, 1, Direction.EAST),
            _place(VehicleKind.TAXI, 10, 3, Direction.SOUTH),
            _place(VehicleKind.TRUCK, 1, 6, Direction.NORTH),
            _place(VehicleKind.BICYCLE, 3, 3, Direction.EAST),
            _place(VehicleKind.ATV, 6, 5, Direction.WEST),
            _place(VehicleKind.HUMAN, 7, 2, Direction.WEST),
            _place(VehicleKind.HUMAN, 3, 6, Direction.EAST),
        ),
    )

    crosswalk = CityScenario(
        name="crosswalk",
        description=(
            "A single street crossed by a crosswalk under a red light. Cars "
            "queue, the taxi eventually runs the light and the truck follows."
        ),
        rows=(
            "GGGGGCGGGGG",
            "SSSSSCSSSSS",
            "GGGGGCGGGGG",
        ),
        placements=(
            _place(VehicleKind.CAR, 0, 1, Direction.EAST),
            _place(VehicleKind.TAXI, 2, 1, Direction.EAST),
            _place(VehicleKind.TRUCK, 10, 1, Direction.WEST),
            _place(VehicleKind.HUMAN, 5, 0, Direction.SOUTH),
        ),
        light=Light.RED,
    )

    return [downtown, crosswalk]


def get_scenario(name: str) -> CityScenario:
    """Look up a predefined scenario by name."""

    scenarios: Dict[str, CityScenario] = {
        scenario.name: scenario for scenario in load_predefined_scenarios()
    }
    try:
        return scenarios[name]
    except KeyError:
        available = ", ".join(sorted(scenarios))
        raise KeyError(f"Unknown scenario {name!r}; available: {available}") from None
