from dataclasses import dataclass, field
from typing import Optional

@dataclass
class TimingSettings:
    base_green_seconds: int = 30
    yellow_seconds: int = 5
    min_green_seconds: int = 10
    max_green_seconds: int = 60
    enforce_yellow_hold: bool = False

@dataclass
class SensorFeedSettings:
    enabled: bool = True
    detection_probability: float = 0.2
    interval_seconds: float = 1.0
    seed: Optional[int] = None

@dataclass
class EmergencySettings:
    enabled: bool = True
    probability: float = 0.05
    hold_seconds: float = 5.0
    seed: Optional[int] = None

@dataclass
class ServerSettings:
    host: str = "0.0.0.0"
    port: int = 8000

@dataclass
class ControlConfig:
    tick_seconds: float = 1.0
    display: bool = True
    timing: TimingSettings = field(default_factory=TimingSettings)
    sensor_feed: SensorFeedSettings = field(default_factory=SensorFeedSettings)
    emergency: EmergencySettings = field(default_factory=EmergencySettings)
    server: ServerSettings = field(default_factory=ServerSettings)
