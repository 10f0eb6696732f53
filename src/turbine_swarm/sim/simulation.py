from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
import threading

from turbine_swarm.config import Command, SimulationConfig
from turbine_swarm.io.snapshot import (
    BaselineSnapshot,
    SimulationSnapshot,
    StatsSnapshot,
    TurbineSnapshot,
)
from turbine_swarm.models.wind_field import WindField, WindState
from turbine_swarm.sim.baseline import BaselineTracker
from turbine_swarm.sim.swarm import SwarmAggregator

# Simulation clock: owns the whole simulation state and advances it one tick at a time
# Tick order is fixed: wind -> swarm controllers -> swarm totals -> baseline -> histories
# Controllers, aggregation and baseline all see the same wind sample

logger = logging.getLogger(__name__)


@dataclass
class SimulationClock:
    config: SimulationConfig = field(default_factory=SimulationConfig)
    wind_field: WindField = field(default_factory=WindField)
    swarm: SwarmAggregator = field(default_factory=SwarmAggregator)
    baseline: BaselineTracker = field(default_factory=BaselineTracker)
    tick_count: int = 0
    is_running: bool = False

    def __post_init__(self):
        self.wind = WindState(angle_deg=0.0, speed=self.config.wind_speed_base, vertical=0.0)
        self._lock = threading.Lock() # A tick and a reset never interleave

    def update_config(self, **changes) -> SimulationConfig:
        # Picked up by the next tick
        self.config = replace(self.config, **changes)
        return self.config

    def tick(self) -> float:
        with self._lock:
            cfg = self.config
            self.tick_count += 1

            self.wind = self.wind_field.sample(self.tick_count, cfg.wind_pattern, cfg.wind_speed_base)
            current_energy = self.swarm.step(self.wind, cfg.learning_rate)
            baseline = self.baseline.step(self.wind)

            self.swarm.stats.record(current_energy)
            self.baseline.stats.record(baseline.energy)

            logger.debug(
                "tick=%d wind=%.1f swarm=%.2f baseline=%.2f",
                self.tick_count, self.wind.angle_deg, current_energy, baseline.energy,
            )
            return current_energy

    def run(self, n_ticks: int) -> SimulationSnapshot:
        for _ in range(n_ticks):
            self.tick()
        return self.snapshot()

    def start(self) -> None:
        self.is_running = True
        logger.info("Simulation started at tick %d", self.tick_count)

    def pause(self) -> None:
        # Accumulators are left untouched, start() resumes where we stopped
        self.is_running = False
        logger.info("Simulation paused at tick %d", self.tick_count)

    def toggle(self) -> bool:
        if self.is_running:
            self.pause()
        else:
            self.start()
        return self.is_running

    def reset(self) -> None:
        with self._lock:
            self.is_running = False
            self.tick_count = 0
            self.wind = WindState(angle_deg=0.0, speed=self.config.wind_speed_base, vertical=0.0)
            self.wind_field = WindField(seed=self.wind_field.seed) # Same random sequence as a fresh start
            self.swarm.reset()
            self.baseline.reset()
        logger.info("Simulation reset")

    def handle(self, command: Command | str) -> None:
        command = Command(command)
        if command is Command.START:
            self.start()
        elif command is Command.PAUSE:
            self.pause()
        elif command is Command.TOGGLE:
            self.toggle()
        else:
            self.reset()

    def snapshot(self) -> SimulationSnapshot:
        with self._lock:
            return self._snapshot()

    def _snapshot(self) -> SimulationSnapshot:
        return SimulationSnapshot(
            tick=self.tick_count,
            is_running=self.is_running,
            config=self.config,
            wind=self.wind,
            turbines=tuple(TurbineSnapshot.of(t) for t in self.swarm.turbines),
            baseline=BaselineSnapshot.of(self.baseline.turbine, self.baseline.stats.total_energy, self.tick_count),
            swarm_stats=StatsSnapshot.of(self.swarm.stats),
            baseline_stats=StatsSnapshot.of(self.baseline.stats),
            synergy_bonus=self.swarm.synergy_bonus,
            mean_angle=self.swarm.mean_angle,
            mean_tilt=self.swarm.mean_tilt(),
        )
