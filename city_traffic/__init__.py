"""Grid city traffic simulation package."""

from .config import SimulationConfig
from .direction import Direction
from .system import CitySimulation
from .terrain import Light, Terrain
from .vehicle import Vehicle, VehicleKind

__all__ = [
    "CitySimulation",
    "Direction",
    "Light",
    "SimulationConfig",
    "Terrain",
    "Vehicle",
    "VehicleKind",
]
