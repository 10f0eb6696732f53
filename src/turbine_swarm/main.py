from __future__ import annotations

import logging
from typing import Tuple

import pandas as pd

from turbine_swarm.config import ScenarioConfig, WindPattern
from turbine_swarm.models.wind_field import WindField
from turbine_swarm.pipelines.comparison import ComparisonReport, hourly_rollup
from turbine_swarm.sim.simulation import SimulationClock
from turbine_swarm.sim.trace import TraceRecorder

logger = logging.getLogger(__name__)


def build_simulation(cfg: ScenarioConfig) -> SimulationClock:
    return SimulationClock(
        config=cfg.simulation_config(),
        wind_field=WindField(seed=cfg.seed),
    )


def run_scenario(cfg: ScenarioConfig) -> Tuple[pd.DataFrame, ComparisonReport]:
    sim = build_simulation(cfg)
    sim.start()

    recorder = TraceRecorder(sim)
    trace = recorder.run(cfg.n_ticks)

    sim.pause()
    report = ComparisonReport.from_snapshot(sim.snapshot())

    logger.info(
        "[%s] %d ticks, pattern=%s: swarm %.2f kWh vs baseline %.2f kWh (%s)",
        cfg.run_id, report.tick, cfg.wind_pattern.value,
        report.swarm_total_energy, report.baseline_total_energy, report.improvement_label,
    )
    return trace, report


def main():
    logging.basicConfig(level=logging.INFO, format="[%(name)s][%(levelname)s] %(message)s")

    scenarios = [
        ScenarioConfig(run_id=f"SIM-{pattern.value.upper()}", wind_pattern=pattern)
        for pattern in WindPattern
    ]

    for cfg in scenarios:
        trace, report = run_scenario(cfg)
        hourly = hourly_rollup(trace)
        logger.info(
            "[%s] avg power swarm %.2f kW / baseline %.2f kW, efficiency %.1f%% / %.1f%%, %d hour buckets",
            cfg.run_id, report.swarm_avg_power, report.baseline_avg_power,
            report.swarm_efficiency, report.baseline_efficiency, len(hourly),
        )


if __name__ == "__main__":
    main()
