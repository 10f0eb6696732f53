"""Tests for the energy model."""

import math

import pytest

from turbine_swarm.models.energy_model import EnergyModel, EnergyResult, fold_angle_diff


class TestFoldAngleDiff:

    def test_small_difference_unchanged(self):
        assert fold_angle_diff(100.0, 90.0) == 10.0

    def test_wraps_past_180(self):
        assert fold_angle_diff(350.0, 10.0) == 20.0
        assert fold_angle_diff(10.0, 350.0) == 20.0

    def test_exactly_180_is_kept(self):
        assert fold_angle_diff(270.0, 90.0) == 180.0


class TestEvaluate:

    def test_is_pure(self, energy_model):
        args = (37.0, 4.0, 81.5, 13.2, -2.7, True)
        assert energy_model.evaluate(*args) == energy_model.evaluate(*args)

    def test_perfect_alignment_gives_full_energy(self, energy_model):
        speed, vertical = 15.0, 3.0
        optimal_tilt = math.degrees(math.atan2(vertical, speed))

        result = energy_model.evaluate(90.0, optimal_tilt, 90.0, speed, vertical, True)

        effective = math.sqrt(speed ** 2 + vertical ** 2)
        assert result.efficiency == pytest.approx(100.0)
        assert result.energy == pytest.approx(0.5 * (effective / 10.0) ** 3 * 100.0 * 0.36)
        assert result.optimal_tilt == pytest.approx(optimal_tilt)

    def test_facing_away_gives_zero(self, energy_model):
        # 180 deg off horizontally and tilted against the updraft
        result = energy_model.evaluate(270.0, -30.0, 90.0, 12.0, 4.0, True)
        assert result.energy == 0.0
        assert result.efficiency == 0.0

    def test_large_turbine_is_unscaled(self, energy_model):
        small = energy_model.evaluate(80.0, 0.0, 90.0, 15.0, 0.0, True)
        large = energy_model.evaluate(80.0, 0.0, 90.0, 15.0, 0.0, False)
        assert small.energy == pytest.approx(large.energy * 0.36)
        assert small.efficiency == large.efficiency

    def test_crosswind_keeps_vertical_share(self, energy_model):
        # Horizontal alignment cos(90) ~ 0, vertical alignment 1 -> 30% alignment
        result = energy_model.evaluate(0.0, 0.0, 90.0, 10.0, 0.0, False)
        assert result.efficiency == pytest.approx(30.0)
        assert result.energy == pytest.approx(15.0)

    def test_wrapped_angles_match(self, energy_model):
        a = energy_model.evaluate(350.0, 0.0, 10.0, 15.0, 0.0, True)
        b = energy_model.evaluate(30.0, 0.0, 10.0, 15.0, 0.0, True)
        assert a.energy == pytest.approx(b.energy)

    def test_calm_air_is_finite_zero(self, energy_model):
        result = energy_model.evaluate(0.0, 0.0, 90.0, 0.0, 0.0, True)
        assert isinstance(result, EnergyResult)
        assert result.energy == 0.0
        assert result.optimal_tilt == 0.0
        assert math.isfinite(result.efficiency)

    def test_downdraft_gives_negative_optimal_tilt(self, energy_model):
        result = energy_model.evaluate(90.0, 0.0, 90.0, 10.0, -10.0, True)
        assert result.optimal_tilt == pytest.approx(-45.0)

    def test_custom_calibration(self):
        model = EnergyModel(small_size_multiplier=0.5)
        result = model.evaluate(90.0, 0.0, 90.0, 10.0, 0.0, True)
        assert result.energy == pytest.approx(25.0)
