from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Swarm / accounting constants shared across the simulation
HISTORY_CAPACITY = 300 # Max samples kept per energy history
TICKS_PER_HOUR = 60 # 60 ticks count as one hour-equivalent of energy
CHART_WINDOW = 200 # Points shown by the live chart


class WindPattern(str, Enum):
    STEADY = "steady"
    GUSTY = "gusty"
    ROTATING = "rotating"
    URBAN = "urban"
    VARIABLE = "variable"

    @classmethod
    def parse(cls, value: WindPattern | str) -> WindPattern:
        # Anything unrecognised behaves like the variable pattern
        try:
            return cls(value)
        except ValueError:
            return cls.VARIABLE


class Command(str, Enum):
    START = "start"
    PAUSE = "pause"
    TOGGLE = "toggle"
    RESET = "reset"


@dataclass(frozen=True)
class SimulationConfig:
    # Live parameters, read at every tick
    wind_pattern: WindPattern = WindPattern.URBAN
    learning_rate: float = 0.5 # 0-1 typical, never clamped
    wind_speed_base: float = 15.0

    def __post_init__(self):
        object.__setattr__(self, "wind_pattern", WindPattern.parse(self.wind_pattern))


@dataclass(frozen=True)
class ScenarioConfig:
    run_id: str
    n_ticks: int = 1000
    seed: int | None = 42

    # Simulation params
    wind_pattern: WindPattern = WindPattern.URBAN
    learning_rate: float = 0.5
    wind_speed_base: float = 15.0

    def __post_init__(self):
        object.__setattr__(self, "wind_pattern", WindPattern.parse(self.wind_pattern))

    def simulation_config(self) -> SimulationConfig:
        return SimulationConfig(
            wind_pattern=self.wind_pattern,
            learning_rate=self.learning_rate,
            wind_speed_base=self.wind_speed_base,
        )
