from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from turbine_swarm.models.controller import TurbineController
from turbine_swarm.models.energy_model import fold_angle_diff
from turbine_swarm.models.swarm_layout import Turbine, make_honeycomb_swarm
from turbine_swarm.models.wind_field import WindState
from turbine_swarm.sim.stats import RunningStats

# Swarm aggregation: run every turbine's controller, then reward angular coherence
# with a synergy bonus applied to energy (not to the reported efficiency)

MAX_SYNERGY_BONUS = 0.15 # +15% at perfect alignment


def mean_angle(angles: Sequence[float]) -> float:
    # Plain arithmetic mean, not a circular mean: angles either side of 0/360
    # pull the mean toward 180
    return sum(angles) / len(angles)


def angular_spread(angles: Sequence[float], center: float) -> float:
    return sum(fold_angle_diff(a, center) for a in angles) / len(angles)


def synergy_bonus(spread_deg: float) -> float:
    return 1.0 + (1.0 - spread_deg / 180.0) * MAX_SYNERGY_BONUS


@dataclass
class SwarmAggregator:
    controller: TurbineController = field(default_factory=TurbineController)
    turbines: List[Turbine] = field(default_factory=make_honeycomb_swarm)
    stats: RunningStats = field(default_factory=RunningStats)
    mean_angle: float = 0.0
    angle_spread: float = 0.0
    synergy_bonus: float = 1.0

    def step(self, wind: WindState, learning_rate: float) -> float:
        for turbine in self.turbines:
            self.controller.update(turbine, wind, learning_rate)
        return self.finalize()

    def finalize(self) -> float:
        raw_energy = sum(t.energy for t in self.turbines)
        raw_efficiency = sum(t.efficiency for t in self.turbines)

        angles = [t.angle for t in self.turbines]
        self.mean_angle = mean_angle(angles)
        self.angle_spread = angular_spread(angles, self.mean_angle)
        self.synergy_bonus = synergy_bonus(self.angle_spread)

        current_energy = raw_energy * self.synergy_bonus
        self.stats.accumulate(current_energy, raw_efficiency / len(self.turbines))
        return current_energy

    def mean_tilt(self) -> float:
        return sum(t.tilt for t in self.turbines) / len(self.turbines)

    def reset(self) -> None:
        self.turbines = make_honeycomb_swarm()
        self.stats.reset()
        self.mean_angle = 0.0
        self.angle_spread = 0.0
        self.synergy_bonus = 1.0
