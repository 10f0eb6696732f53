from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import pandas as pd

from turbine_swarm.config import CHART_WINDOW, TICKS_PER_HOUR
from turbine_swarm.io.snapshot import SimulationSnapshot
from turbine_swarm.sim.stats import average_power

# Swarm vs baseline KPIs, as shown by the live display
# plus hourly rollups of a recorded trace


def improvement_pct(swarm_total: float, baseline_total: float) -> float:
    if baseline_total <= 0:
        return 0.0
    return (swarm_total - baseline_total) / baseline_total * 100.0


def format_improvement(pct: float) -> str:
    return f"+{pct:.1f}%" if pct >= 0 else f"{pct:.1f}%"


def bar_fractions(swarm_value: float, baseline_value: float) -> Tuple[float, float]:
    # Bars are scaled against the larger side, never against less than 1
    scale = max(swarm_value, baseline_value, 1.0)
    return swarm_value / scale, baseline_value / scale


@dataclass(frozen=True)
class ChartWindow:
    swarm: Tuple[float, ...]
    baseline: Tuple[float, ...]
    y_max: float

    @property
    def drawable(self) -> bool:
        # A line needs at least two points
        return len(self.swarm) >= 2


def chart_window(snap: SimulationSnapshot, max_points: int = CHART_WINDOW) -> ChartWindow:
    swarm = snap.swarm_stats.energy_history[-max_points:]
    baseline = snap.baseline_stats.energy_history[-max_points:]
    return ChartWindow(swarm=swarm, baseline=baseline, y_max=max((*swarm, *baseline, 1.0)))


@dataclass(frozen=True)
class ComparisonReport:
    tick: int
    swarm_total_energy: float
    baseline_total_energy: float
    swarm_avg_power: float
    baseline_avg_power: float
    improvement_pct: float
    swarm_total_bar: float
    baseline_total_bar: float
    swarm_avg_bar: float
    baseline_avg_bar: float
    swarm_efficiency: float
    baseline_efficiency: float
    mean_angle: float
    mean_tilt: float

    @classmethod
    def from_snapshot(cls, snap: SimulationSnapshot) -> ComparisonReport:
        swarm_total = snap.swarm_stats.total_energy
        baseline_total = snap.baseline_stats.total_energy
        swarm_avg = average_power(swarm_total, snap.tick)
        baseline_avg = average_power(baseline_total, snap.tick)

        swarm_total_bar, baseline_total_bar = bar_fractions(swarm_total, baseline_total)
        swarm_avg_bar, baseline_avg_bar = bar_fractions(swarm_avg, baseline_avg)

        return cls(
            tick=snap.tick,
            swarm_total_energy=swarm_total,
            baseline_total_energy=baseline_total,
            swarm_avg_power=swarm_avg,
            baseline_avg_power=baseline_avg,
            improvement_pct=improvement_pct(swarm_total, baseline_total),
            swarm_total_bar=swarm_total_bar,
            baseline_total_bar=baseline_total_bar,
            swarm_avg_bar=swarm_avg_bar,
            baseline_avg_bar=baseline_avg_bar,
            swarm_efficiency=snap.swarm_stats.efficiency,
            baseline_efficiency=snap.baseline_stats.efficiency,
            mean_angle=snap.mean_angle,
            mean_tilt=snap.mean_tilt,
        )

    @property
    def improvement_label(self) -> str:
        return format_improvement(self.improvement_pct)


def hourly_rollup(trace: pd.DataFrame, ticks_per_hour: int = TICKS_PER_HOUR) -> pd.DataFrame:

    if trace.empty:
        return pd.DataFrame(columns=[
            "hour", "ticks", "swarm_power_avg", "baseline_power_avg",
            "swarm_energy", "baseline_energy", "improvement_pct",
        ])

    df = trace.copy()

    # Hour bucket: ticks 1..60 -> hour 0, 61..120 -> hour 1, ...
    df["hour"] = (df["tick"] - 1) // ticks_per_hour

    # Energy per row: power * (1 / ticks_per_hour) hours
    df["swarm_energy_h"] = df["swarm_energy"] / ticks_per_hour
    df["baseline_energy_h"] = df["baseline_energy"] / ticks_per_hour

    agg = (
        df.groupby("hour", as_index=False)
          .agg(
              ticks=("tick", "count"),
              swarm_power_avg=("swarm_energy", "mean"),
              baseline_power_avg=("baseline_energy", "mean"),
              swarm_energy=("swarm_energy_h", "sum"),
              baseline_energy=("baseline_energy_h", "sum"),
          )
    )

    agg["improvement_pct"] = [
        improvement_pct(s, b) for s, b in zip(agg["swarm_energy"], agg["baseline_energy"])
    ]
    return agg
