"""
Domain entities for the Control module.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

class Direction(Enum):
    NORTH = "NORTH"
    SOUTH = "SOUTH"
    EAST = "EAST"
    WEST = "WEST"

    @property
    def axis(self) -> "Axis":
        if self in (Direction.NORTH, Direction.SOUTH):
            return Axis.NS
        return Axis.EW

class Axis(Enum):
    """
    A pair of opposing directions that always share the same light state.
    """
    NS = "NS"
    EW = "EW"

    @property
    def members(self) -> Tuple[Direction, Direction]:
        if self is Axis.NS:
            return (Direction.NORTH, Direction.SOUTH)
        return (Direction.EAST, Direction.WEST)

    @property
    def opposite(self) -> "Axis":
        return Axis.EW if self is Axis.NS else Axis.NS

class LightState(Enum):
    RED = "RED"
    YELLOW = "YELLOW"
    GREEN = "GREEN"

class Phase(Enum):
    """
    Controller phases. ALL_RED only exists before the first tick.
    """
    ALL_RED = "ALL_RED"
    NS_GREEN = "NS_GREEN"
    NS_YELLOW = "NS_YELLOW"
    EW_GREEN = "EW_GREEN"
    EW_YELLOW = "EW_YELLOW"
    EMERGENCY = "EMERGENCY"

    @property
    def axis(self) -> Optional[Axis]:
        if self in (Phase.NS_GREEN, Phase.NS_YELLOW):
            return Axis.NS
        if self in (Phase.EW_GREEN, Phase.EW_YELLOW):
            return Axis.EW
        return None

    @property
    def is_green(self) -> bool:
        return self in (Phase.NS_GREEN, Phase.EW_GREEN)

    @property
    def is_yellow(self) -> bool:
        return self in (Phase.NS_YELLOW, Phase.EW_YELLOW)

    @staticmethod
    def green_for(axis: Axis) -> "Phase":
        return Phase.NS_GREEN if axis is Axis.NS else Phase.EW_GREEN

    @staticmethod
    def yellow_for(axis: Axis) -> "Phase":
        return Phase.NS_YELLOW if axis is Axis.NS else Phase.EW_YELLOW

@dataclass(frozen=True)
class TrafficLight:
    """
    Light facing one approach. `duration` is the planned green hold in seconds
    and is advisory until the light's axis turns green.
    """
    direction: Direction
    state: LightState = LightState.RED
    duration: int = 0

@dataclass(frozen=True)
class SensorReading:
    """
    Latest presence signal for one approach.
    last_detected_at only moves on a positive detection.
    """
    direction: Direction
    presence: bool = False
    last_detected_at: Optional[float] = None

@dataclass(frozen=True)
class IntersectionSnapshot:
    """
    Read-only view of the intersection after a tick.
    """
    timestamp: float
    phase: Phase
    lights: Dict[Direction, TrafficLight] = field(default_factory=dict)
    emergency_active: bool = False
    last_phase_change: float = 0.0

    def light(self, direction: Direction) -> TrafficLight:
        return self.lights[direction]

    def axis_state(self, axis: Axis) -> LightState:
        return self.lights[axis.members[0]].state

    def axis_duration(self, axis: Axis) -> int:
        return self.lights[axis.members[0]].duration

    def to_dict(self) -> Dict:
        return {
            'timestamp': self.timestamp,
            'phase': self.phase.value,
            'emergency_active': self.emergency_active,
            'last_phase_change': self.last_phase_change,
            'lights': {
                d.value: {'state': light.state.value, 'duration': light.duration}
                for d, light in self.lights.items()
            }
        }
