from __future__ import annotations

from dataclasses import dataclass, field

from turbine_swarm.models.energy_model import EnergyModel, EnergyResult
from turbine_swarm.models.swarm_layout import BaselineTurbine
from turbine_swarm.models.wind_field import WindState
from turbine_swarm.sim.stats import RunningStats


# Single large turbine that never yaws or tilts
@dataclass
class BaselineTracker:
    energy_model: EnergyModel = field(default_factory=EnergyModel)
    turbine: BaselineTurbine = field(default_factory=BaselineTurbine)
    stats: RunningStats = field(default_factory=RunningStats)

    def step(self, wind: WindState) -> EnergyResult:
        result = self.energy_model.evaluate(
            self.turbine.angle,
            self.turbine.tilt,
            wind.angle_deg,
            wind.speed,
            wind.vertical,
            is_small_turbine=False,
        )
        self.turbine.energy = result.energy
        self.turbine.efficiency = result.efficiency
        self.stats.accumulate(result.energy, result.efficiency)
        return result

    def reset(self) -> None:
        self.turbine = BaselineTurbine()
        self.stats.reset()
