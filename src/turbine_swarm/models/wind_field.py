from __future__ import annotations
from dataclasses import dataclass
import numpy as np

from turbine_swarm.config import WindPattern

# Wind field model for the swarm simulation
# Each pattern layers a deterministic trend (angle, speed) with random gusts / turbulence
# The angle is left unnormalized, consumers fold it where they need to


@dataclass(frozen=True)
class WindState:
    angle_deg: float # Horizontal direction in degrees
    speed: float # Horizontal speed
    vertical: float = 0.0 # Signed vertical component (updraft > 0)


@dataclass
class WindField:
    seed: int | None = None

# Initialize the random number generator
    def __post_init__(self):
        self.rng = np.random.default_rng(self.seed) # Seedable for reproducible runs

    def sample(self, t: int, pattern: WindPattern | str, base_speed: float) -> WindState:
        pattern = WindPattern.parse(pattern)

        if pattern is WindPattern.STEADY:
            return WindState(angle_deg=90.0, speed=base_speed, vertical=0.0)
        if pattern is WindPattern.GUSTY:
            return self._gusty(t, base_speed)
        if pattern is WindPattern.ROTATING:
            return self._rotating(t, base_speed)
        if pattern is WindPattern.URBAN:
            return self._urban(t, base_speed)
        return self._variable(t, base_speed)

    def _gusty(self, t: int, base_speed: float) -> WindState:
        # +-45 deg swing around east
        angle = 90.0 + np.sin(t / 30.0) * 45.0
        speed = base_speed * (0.7 + self.rng.random() * 0.6) # Gust factor in [0.7, 1.3)
        vertical = np.sin(t / 20.0) * 3.0
        return WindState(float(angle), float(speed), float(vertical))

    def _rotating(self, t: int, base_speed: float) -> WindState:
        # Full turn every 180 ticks
        angle = (t * 2.0) % 360.0
        vertical = np.sin(t / 40.0) * 2.0
        return WindState(float(angle), float(base_speed), float(vertical))

    def _urban(self, t: int, base_speed: float) -> WindState:

        # Slow direction drift + building channeling + turbulence
        angle = (
            90.0
            + np.sin(t / 50.0) * 40.0
            + np.sin(t / 13.0) * 15.0
            + (self.rng.random() - 0.5) * 8.0
        )

        # Periodic variation with gusts on top
        speed = base_speed * (
            0.75
            + np.sin(t / 35.0) * 0.25
            + self.rng.random() * 0.15
        )

        # Thermal updrafts, building wake, shear and eddies
        vertical = (
            np.sin(t / 45.0) * 4.0
            + np.sin(t / 17.0) * 2.0
            + np.cos(t / 29.0) * 1.5
            + (self.rng.random() - 0.5) * 1.0
        )
        return WindState(float(angle), float(speed), float(vertical))

    def _variable(self, t: int, base_speed: float) -> WindState:
        angle = (
            90.0
            + np.sin(t / 50.0) * 30.0
            + np.sin(t / 23.0) * 15.0
            + np.cos(t / 37.0) * 10.0
        )
        speed = base_speed * (0.8 + np.sin(t / 40.0) * 0.2 + self.rng.random() * 0.1)
        vertical = np.sin(t / 30.0) * 2.0
        return WindState(float(angle), float(speed), float(vertical))
