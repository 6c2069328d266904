"""
Density-driven green time assignment.
"""
from typing import Dict, Mapping
from ..domain import Axis, Direction, SensorReading, TimingConfig

# Presence on one approach adds this much to its axis density (0/3/6 per axis)
DENSITY_PER_APPROACH = 3
# An axis must lead by more than this to be favoured
DENSITY_MARGIN = 4
EXTENSION_SECONDS = 15
REDUCTION_SECONDS = 10

def axis_density(sensors: Mapping[Direction, SensorReading], axis: Axis) -> int:
    return sum(DENSITY_PER_APPROACH for d in axis.members if sensors[d].presence)

def compute_durations(sensors: Mapping[Direction, SensorReading], config: TimingConfig) -> Dict[Direction, int]:
    """
    Computes the green hold for every direction from the current sensor snapshot.

    The busier axis gets base + 15s and the other base - 10s when one axis leads
    by more than DENSITY_MARGIN; otherwise every direction gets the base time.
    Results are clamped into [min_green_seconds, max_green_seconds].

    Pure: no side effects, same output for the same inputs.
    """
    base = config.base_green_seconds
    density_ns = axis_density(sensors, Axis.NS)
    density_ew = axis_density(sensors, Axis.EW)

    if density_ns > density_ew + DENSITY_MARGIN:
        per_axis = {Axis.NS: base + EXTENSION_SECONDS, Axis.EW: base - REDUCTION_SECONDS}
    elif density_ew > density_ns + DENSITY_MARGIN:
        per_axis = {Axis.EW: base + EXTENSION_SECONDS, Axis.NS: base - REDUCTION_SECONDS}
    else:
        per_axis = {Axis.NS: base, Axis.EW: base}

    return {
        direction: config.clamp(per_axis[direction.axis])
        for direction in Direction
    }
