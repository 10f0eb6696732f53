"""Tests for the wind field generator."""

import math

import numpy as np
import pytest

from turbine_swarm.config import WindPattern
from turbine_swarm.models.wind_field import WindField, WindState


class TestSteadyAndRotating:
    """Patterns without random components."""

    def test_steady_is_constant(self):
        wf = WindField(seed=0)
        for t in (0, 1, 50, 1000):
            assert wf.sample(t, WindPattern.STEADY, 12.0) == WindState(90.0, 12.0, 0.0)

    def test_rotating_full_turn_every_180_ticks(self):
        wf = WindField(seed=0)
        assert wf.sample(0, WindPattern.ROTATING, 10.0).angle_deg == 0.0
        assert wf.sample(45, WindPattern.ROTATING, 10.0).angle_deg == 90.0
        assert wf.sample(90, WindPattern.ROTATING, 10.0).angle_deg == 180.0
        assert wf.sample(180, WindPattern.ROTATING, 10.0).angle_deg == 0.0

    def test_rotating_keeps_base_speed_and_bounded_vertical(self):
        wf = WindField(seed=0)
        for t in range(400):
            w = wf.sample(t, WindPattern.ROTATING, 10.0)
            assert w.speed == 10.0
            assert abs(w.vertical) <= 2.0


class TestGusty:
    """Gusty pattern: deterministic angle, random speed."""

    def test_angle_and_vertical_follow_sinusoids(self):
        wf = WindField(seed=3)
        for t in (0, 10, 47, 94, 300):
            w = wf.sample(t, WindPattern.GUSTY, 10.0)
            assert w.angle_deg == pytest.approx(90.0 + 45.0 * math.sin(t / 30.0))
            assert w.vertical == pytest.approx(3.0 * math.sin(t / 20.0))

    def test_speed_factor_range(self):
        wf = WindField(seed=3)
        speeds = np.array([wf.sample(t, WindPattern.GUSTY, 10.0).speed for t in range(2000)])
        assert speeds.min() >= 7.0
        assert speeds.max() < 13.0
        # Draws are independent per tick
        assert len(np.unique(speeds)) > 1000


class TestUrban:
    """Urban pattern bounds."""

    def test_components_within_ranges(self):
        wf = WindField(seed=11)
        for t in range(3000):
            w = wf.sample(t, WindPattern.URBAN, 15.0)
            assert 90.0 - 59.0 <= w.angle_deg <= 90.0 + 59.0
            assert 15.0 * 0.5 <= w.speed <= 15.0 * 1.15
            assert abs(w.vertical) <= 8.0

    def test_angle_is_not_normalized(self):
        """The generator hands back raw angles; consumers fold them."""
        wf = WindField(seed=11)
        angles = [wf.sample(t, WindPattern.URBAN, 15.0).angle_deg for t in range(500)]
        assert min(angles) < 90.0 < max(angles)


class TestVariable:
    """Variable pattern and fallback behaviour."""

    def test_angle_is_deterministic(self):
        wf = WindField(seed=5)
        for t in (1, 25, 250):
            expected = 90.0 + math.sin(t / 50.0) * 30.0 + math.sin(t / 23.0) * 15.0 + math.cos(t / 37.0) * 10.0
            assert wf.sample(t, WindPattern.VARIABLE, 15.0).angle_deg == pytest.approx(expected)

    def test_speed_range(self):
        wf = WindField(seed=5)
        for t in range(1000):
            w = wf.sample(t, WindPattern.VARIABLE, 10.0)
            assert 6.0 <= w.speed <= 11.0
            assert abs(w.vertical) <= 2.0

    def test_unknown_pattern_falls_back_to_variable(self):
        a = WindField(seed=9)
        b = WindField(seed=9)
        for t in range(20):
            assert a.sample(t, "hurricane", 15.0) == b.sample(t, "variable", 15.0)


class TestSeeding:
    """Seeded generators reproduce their random components."""

    @pytest.mark.parametrize("pattern", list(WindPattern))
    def test_same_seed_same_sequence(self, pattern):
        a = WindField(seed=42)
        b = WindField(seed=42)
        assert [a.sample(t, pattern, 15.0) for t in range(100)] == [b.sample(t, pattern, 15.0) for t in range(100)]
