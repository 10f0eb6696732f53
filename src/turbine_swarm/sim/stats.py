from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque

from turbine_swarm.config import HISTORY_CAPACITY, TICKS_PER_HOUR

# Running energy statistics for one side of the comparison (swarm or baseline)
# total_energy only ever grows within a run; reset() is the only way back to zero


def average_power(total_energy: float, ticks: int, ticks_per_hour: int = TICKS_PER_HOUR) -> float:
    # Zero elapsed time (or nothing produced yet) reports 0, never NaN / inf
    if ticks <= 0 or total_energy <= 0:
        return 0.0
    return total_energy / (ticks / ticks_per_hour)


@dataclass
class RunningStats:
    capacity: int = HISTORY_CAPACITY
    ticks_per_hour: int = TICKS_PER_HOUR
    total_energy: float = 0.0
    current_energy: float = 0.0
    efficiency: float = 0.0
    energy_history: Deque[float] = field(init=False)

    def __post_init__(self):
        self.energy_history = deque(maxlen=self.capacity) # Oldest sample evicted first

    def accumulate(self, energy: float, efficiency: float) -> None:
        self.current_energy = energy
        self.efficiency = efficiency
        self.total_energy += max(0.0, energy) / self.ticks_per_hour

    def record(self, sample: float) -> None:
        self.energy_history.append(sample)

    def average_power(self, ticks: int) -> float:
        return average_power(self.total_energy, ticks, self.ticks_per_hour)

    def reset(self) -> None:
        self.total_energy = 0.0
        self.current_energy = 0.0
        self.efficiency = 0.0
        self.energy_history.clear()
