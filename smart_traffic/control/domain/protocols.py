"""
Domain protocols for the Control module.
"""
from typing import Dict, Mapping, Protocol
from .configuration import TimingConfig
from .entities import Direction, IntersectionSnapshot, SensorReading

class TimingPolicy(Protocol):
    """
    Maps a sensor snapshot to green durations per direction.
    """
    def __call__(self, sensors: Mapping[Direction, SensorReading], config: TimingConfig) -> Dict[Direction, int]:
        ...

class StatusSink(Protocol):
    """
    Receives the intersection state after every tick (display, API cache...).
    """
    def emit(self, snapshot: IntersectionSnapshot) -> None:
        ...

class PresenceWriter(Protocol):
    """
    Write side used by sensor feeds.
    """
    def set_presence(self, direction: Direction, detected: bool, now: float) -> None:
        ...
