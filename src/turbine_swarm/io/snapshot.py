from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

import pandas as pd

from turbine_swarm.config import SimulationConfig
from turbine_swarm.models.swarm_layout import BaselineTurbine, Turbine
from turbine_swarm.models.wind_field import WindState
from turbine_swarm.sim.stats import RunningStats

# Read-only views of the simulation state handed to rendering / UI layers
# Everything here is immutable plain data; nothing points back into the live state


@dataclass(frozen=True)
class TurbineSnapshot:
    turbine_id: int
    x: float
    y: float
    angle: float
    target_angle: float
    tilt: float
    target_tilt: float
    energy: float
    efficiency: float
    rotation_phase: float

    @classmethod
    def of(cls, turbine: Turbine) -> TurbineSnapshot:
        return cls(**asdict(turbine))


@dataclass(frozen=True)
class BaselineSnapshot:
    angle: float
    tilt: float
    energy: float
    efficiency: float
    total_energy: float
    rotation_phase: float # Visual only, 2 deg per tick

    @classmethod
    def of(cls, turbine: BaselineTurbine, total_energy: float, tick: int) -> BaselineSnapshot:
        return cls(
            angle=turbine.angle,
            tilt=turbine.tilt,
            energy=turbine.energy,
            efficiency=turbine.efficiency,
            total_energy=total_energy,
            rotation_phase=(tick * 2.0) % 360.0,
        )


@dataclass(frozen=True)
class StatsSnapshot:
    total_energy: float
    current_energy: float
    efficiency: float
    energy_history: Tuple[float, ...]

    @classmethod
    def of(cls, stats: RunningStats) -> StatsSnapshot:
        return cls(
            total_energy=stats.total_energy,
            current_energy=stats.current_energy,
            efficiency=stats.efficiency,
            energy_history=tuple(stats.energy_history),
        )


@dataclass(frozen=True)
class SimulationSnapshot:
    tick: int
    is_running: bool
    config: SimulationConfig
    wind: WindState
    turbines: Tuple[TurbineSnapshot, ...]
    baseline: BaselineSnapshot
    swarm_stats: StatsSnapshot
    baseline_stats: StatsSnapshot
    synergy_bonus: float
    mean_angle: float
    mean_tilt: float

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["config"]["wind_pattern"] = self.config.wind_pattern.value
        return data

    def history_frame(self) -> pd.DataFrame:
        # Histories are appended together, so they line up sample for sample
        swarm = self.swarm_stats.energy_history
        baseline = self.baseline_stats.energy_history
        first_tick = self.tick - len(swarm) + 1
        return pd.DataFrame({
            "tick": pd.Series(range(first_tick, first_tick + len(swarm)), dtype="int64"),
            "swarm_energy": pd.Series(swarm, dtype="float64"),
            "baseline_energy": pd.Series(baseline, dtype="float64"),
        })
