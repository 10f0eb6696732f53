from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

import pandas as pd

from turbine_swarm.sim.simulation import SimulationClock

# Per-tick trace of a headless run, one row per tick
# Unlike the bounded energy histories this keeps every tick of the run in memory

TRACE_COLUMNS = [
    "tick",
    "wind_angle_deg",
    "wind_speed",
    "wind_vertical",
    "swarm_energy",
    "swarm_efficiency",
    "synergy_bonus",
    "swarm_mean_angle",
    "swarm_mean_tilt",
    "swarm_total_energy",
    "baseline_energy",
    "baseline_efficiency",
    "baseline_total_energy",
]


def trace_row(sim: SimulationClock) -> Dict[str, Any]:
    # Read straight off the clock, no snapshot per tick
    swarm, baseline = sim.swarm, sim.baseline
    return {
        "tick": sim.tick_count,
        "wind_angle_deg": sim.wind.angle_deg,
        "wind_speed": sim.wind.speed,
        "wind_vertical": sim.wind.vertical,
        "swarm_energy": swarm.stats.current_energy,
        "swarm_efficiency": swarm.stats.efficiency,
        "synergy_bonus": swarm.synergy_bonus,
        "swarm_mean_angle": swarm.mean_angle,
        "swarm_mean_tilt": swarm.mean_tilt(),
        "swarm_total_energy": swarm.stats.total_energy,
        "baseline_energy": baseline.turbine.energy,
        "baseline_efficiency": baseline.turbine.efficiency,
        "baseline_total_energy": baseline.stats.total_energy,
    }


@dataclass
class TraceRecorder:
    simulation: SimulationClock
    rows: List[Dict[str, Any]] = field(default_factory=list)

    def step(self) -> float:
        current_energy = self.simulation.tick()
        self.rows.append(trace_row(self.simulation))
        return current_energy

    def run(self, n_ticks: int) -> pd.DataFrame:
        for _ in range(n_ticks):
            self.step()
        return self.to_frame()

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.rows, columns=TRACE_COLUMNS)
