from __future__ import annotations

from dataclasses import dataclass
import math

# Energy model mapping a turbine's orientation and the wind to power output
# Alignment is a cosine blend of horizontal and vertical misalignment
# Power follows the cubic power-in-wind law with calibration constants (not physical units)


@dataclass(frozen=True)
class EnergyResult:
    energy: float # Instantaneous output, >= 0
    efficiency: float # Alignment as a percentage
    optimal_tilt: float # Tilt (deg) that faces the combined wind vector


def fold_angle_diff(a_deg: float, b_deg: float) -> float:
    diff = abs(a_deg - b_deg)
    if diff > 180.0:
        diff = 360.0 - diff
    return diff


@dataclass(frozen=True)
class EnergyModel:
    horizontal_weight: float = 0.7
    vertical_weight: float = 0.3
    reference_speed: float = 10.0
    power_scale: float = 100.0
    small_size_multiplier: float = 0.36 # 60% blade radius -> 36% swept area
    large_size_multiplier: float = 1.0

    def evaluate(
        self,
        turbine_angle: float,
        turbine_tilt: float,
        wind_angle: float,
        wind_speed: float,
        wind_vertical: float,
        is_small_turbine: bool = False,
    ) -> EnergyResult:

        # Horizontal alignment from the folded angular difference
        angle_diff = fold_angle_diff(wind_angle, turbine_angle)
        horizontal = math.cos(math.radians(angle_diff))

        # Vertical alignment: positive tilt faces an updraft
        optimal_tilt = math.degrees(math.atan2(wind_vertical, wind_speed))
        vertical = math.cos(math.radians(abs(turbine_tilt - optimal_tilt)))

        # Facing away never produces negative energy
        alignment = max(0.0, horizontal * self.horizontal_weight + vertical * self.vertical_weight)

        effective_wind = math.sqrt(wind_speed * wind_speed + wind_vertical * wind_vertical)
        size = self.small_size_multiplier if is_small_turbine else self.large_size_multiplier
        energy = 0.5 * alignment * (effective_wind / self.reference_speed) ** 3 * self.power_scale * size

        return EnergyResult(
            energy=max(0.0, energy),
            efficiency=alignment * 100.0,
            optimal_tilt=optimal_tilt,
        )
