"""High level orchestration of the city traffic simulation."""

from __future__ import annotations

import logging
from typing import Optional

from .config import SimulationConfig
from .scenarios import CityScenario, get_scenario
from .simulation.world import GridWorld, TickSummary

logger = logging.getLogger(__name__)


class CitySimulation:
    """Main entry point running a scenario for a fixed number of ticks."""

    def __init__(self, config: SimulationConfig, scenario: Optional[CityScenario] = None) -> None:
        if config.ticks < 0:
            raise ValueError("ticks must not be negative")
        if config.log_every < 1:
            raise ValueError("log_every must be at least 1")
        self.config = config
        self.scenario = scenario or get_scenario(config.scenario)
        self.rng = config.make_rng()
        self.world: GridWorld = self.scenario.build_world(
            rng=self.rng,
            max_direction_attempts=config.max_direction_attempts,
            light=config.resolved_light(),
        )
        self.last_summary: TickSummary = self.world.summary()

    def step(self) -> TickSummary:
        """Advance the world by one tick."""

        self.last_summary = self.world.tick()
        return self.last_summary

    def run(self) -> TickSummary:
        """Run the configured number of ticks and return the final headcount."""

        logger.info(
            "Running scenario %r for %d ticks with %d vehicles",
            self.scenario.name,
            self.config.ticks,
            len(self.world.vehicles),
        )
        try:
            for _ in range(self.config.ticks):
                summary = self.step()
                if summary.tick % self.config.log_every == 0:
                    logger.info(
                        "tick %d: %d alive, %d dead", summary.tick, summary.alive, summary.dead
                    )
        except KeyboardInterrupt:
            logger.info("Simulation interrupted by user")
        finally:
            logger.info(
                "Finished after %d ticks: %d alive, %d dead",
                self.last_summary.tick,
                self.last_summary.alive,
                self.last_summary.dead,
            )
        return self.last_summary

    def reset(self) -> None:
        self.world.reset()
        self.last_summary = self.world.summary()
