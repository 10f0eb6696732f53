from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

# Honeycomb offsets (unit spacing), clockwise from the top
HONEYCOMB_OFFSETS: Tuple[Tuple[float, float], ...] = (
    (0.0, -1.0),
    (0.866, -0.5),
    (0.866, 0.5),
    (0.0, 1.0),
    (-0.866, 0.5),
    (-0.866, -0.5),
)


def normalize_angle(angle_deg: float) -> float:
    # Wrap into [0, 360); tiny negatives can round up to 360.0
    wrapped = angle_deg % 360.0
    return 0.0 if wrapped >= 360.0 else wrapped


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


# Data class representing one small swarm turbine
@dataclass
class Turbine:
    turbine_id: int
    x: float # Layout offset, x
    y: float # Layout offset, y
    angle: float = 0.0
    target_angle: float = 0.0
    tilt: float = 0.0
    target_tilt: float = 0.0
    energy: float = 0.0
    efficiency: float = 0.0
    rotation_phase: float = 0.0 # Visual only


# The single large fixed-orientation turbine
@dataclass
class BaselineTurbine:
    angle: float = 0.0
    tilt: float = 0.0
    energy: float = 0.0
    efficiency: float = 0.0


def make_honeycomb_swarm() -> List[Turbine]:
    return [
        Turbine(turbine_id=i, x=x, y=y)
        for i, (x, y) in enumerate(HONEYCOMB_OFFSETS)
    ]
