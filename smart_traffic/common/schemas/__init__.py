from .control import TrafficLightStatus, IntersectionStatus, SensorUpdate

__all__ = [
    "TrafficLightStatus",
    "IntersectionStatus",
    "SensorUpdate",
]
