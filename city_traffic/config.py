"""Configuration dataclasses for the city traffic simulation."""

from __future__ import annotations

from dataclasses import dataclass
import random
from typing import Literal, Optional

from .rules.offroad import DEFAULT_MAX_DIRECTION_ATTEMPTS
from .terrain import Light


LightLiteral = Literal["red", "yellow", "green"]


@dataclass(slots=True)
class SimulationConfig:
    """Runtime configuration for :class:`city_traffic.system.CitySimulation`.

    Parameters
    ----------
    scenario:
        Name of a predefined scenario from :mod:`city_traffic.scenarios`.
    ticks:
        Number of ticks :meth:`CitySimulation.run` advances before stopping.
    seed:
        Seed for the random source shared by all vehicles.  ``None`` gives a
        different run every time.
    light:
        Signal shown at every light and crosswalk.  Overrides the scenario's
        own light when given.
    max_direction_attempts:
        Sampling budget for vehicles that pick random headings before they
        give up and turn around.
    log_every:
        Emit a progress summary every ``log_every`` ticks.
    """

    scenario: str = "downtown"
    ticks: int = 200
    seed: Optional[int] = None
    light: Optional[LightLiteral] = None
    max_direction_attempts: int = DEFAULT_MAX_DIRECTION_ATTEMPTS
    log_every: int = 25

    def make_rng(self) -> random.Random:
        """Create the random source handed to every vehicle of a run."""

        return random.Random(self.seed)

    def resolved_light(self) -> Optional[Light]:
        """Return :attr:`light` as a :class:`Light` or ``None`` when unset."""

        if self.light is None:
            return None
        return Light(self.light)
