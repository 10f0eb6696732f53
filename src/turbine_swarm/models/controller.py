from __future__ import annotations

from dataclasses import dataclass, field

from turbine_swarm.models.energy_model import EnergyModel, EnergyResult
from turbine_swarm.models.swarm_layout import Turbine, clamp, normalize_angle
from turbine_swarm.models.wind_field import WindState

# Local hill-climbing policy for one swarm turbine
# Probes +-delta around the current yaw, steps toward the better side,
# and snaps its target to the wind when neither side improves.
# Targets are followed through first-order low-pass filters to avoid overshoot.


@dataclass(frozen=True)
class TurbineController:
    energy_model: EnergyModel = field(default_factory=EnergyModel)
    probe_delta_deg: float = 5.0
    angle_smoothing: float = 0.1
    tilt_smoothing: float = 0.08
    tilt_limit_deg: float = 30.0

    def _evaluate(self, angle: float, tilt: float, wind: WindState) -> EnergyResult:
        return self.energy_model.evaluate(
            angle, tilt, wind.angle_deg, wind.speed, wind.vertical, is_small_turbine=True
        )

    def update(self, turbine: Turbine, wind: WindState, learning_rate: float) -> EnergyResult:
        delta = self.probe_delta_deg

        current = self._evaluate(turbine.angle, turbine.tilt, wind)
        left = self._evaluate(turbine.angle - delta, turbine.tilt, wind)
        right = self._evaluate(turbine.angle + delta, turbine.tilt, wind)

        # Horizontal target
        if left.energy > current.energy and left.energy >= right.energy:
            turbine.target_angle = turbine.angle - delta * learning_rate
        elif right.energy > current.energy:
            turbine.target_angle = turbine.angle + delta * learning_rate
        else:
            turbine.target_angle = wind.angle_deg

        # Tilt target is damped by the learning rate, not jumped to the optimum
        limit = self.tilt_limit_deg
        turbine.target_tilt = clamp(current.optimal_tilt * learning_rate, -limit, limit)

        # Smooth movement toward targets
        turbine.angle += (turbine.target_angle - turbine.angle) * self.angle_smoothing * learning_rate
        turbine.angle = normalize_angle(turbine.angle)

        turbine.tilt += (turbine.target_tilt - turbine.tilt) * self.tilt_smoothing * learning_rate
        turbine.tilt = clamp(turbine.tilt, -limit, limit)

        # Report at the new orientation
        result = self._evaluate(turbine.angle, turbine.tilt, wind)
        turbine.energy = result.energy
        turbine.efficiency = result.efficiency
        turbine.rotation_phase = normalize_angle(turbine.rotation_phase + result.energy * 0.5)

        return result
