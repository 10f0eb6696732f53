"""
Pytest fixtures for the turbine swarm simulation tests.
"""
import pytest

from turbine_swarm.config import SimulationConfig, WindPattern
from turbine_swarm.models.controller import TurbineController
from turbine_swarm.models.energy_model import EnergyModel
from turbine_swarm.models.wind_field import WindField, WindState
from turbine_swarm.sim.simulation import SimulationClock


@pytest.fixture
def energy_model():
    """Default calibration energy model."""
    return EnergyModel()


@pytest.fixture
def controller(energy_model):
    """Hill-climbing controller with default probe and smoothing constants."""
    return TurbineController(energy_model=energy_model)


@pytest.fixture
def east_wind():
    """Steady wind from 90 degrees, no vertical component."""
    return WindState(angle_deg=90.0, speed=15.0, vertical=0.0)


@pytest.fixture
def steady_simulation():
    """Simulation on the steady pattern (no random draws)."""
    cfg = SimulationConfig(wind_pattern=WindPattern.STEADY, learning_rate=0.5, wind_speed_base=15.0)
    return SimulationClock(config=cfg, wind_field=WindField(seed=0))


@pytest.fixture
def urban_simulation():
    """Seeded simulation on the urban pattern."""
    cfg = SimulationConfig(wind_pattern=WindPattern.URBAN, learning_rate=0.5, wind_speed_base=15.0)
    return SimulationClock(config=cfg, wind_field=WindField(seed=1234))
