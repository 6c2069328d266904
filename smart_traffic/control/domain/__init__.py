"""
Domain module initialization.
"""
from .entities import (
    Direction,
    Axis,
    LightState,
    Phase,
    TrafficLight,
    SensorReading,
    IntersectionSnapshot
)
from .configuration import TimingConfig
from .protocols import (
    TimingPolicy,
    StatusSink,
    PresenceWriter
)
