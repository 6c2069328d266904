from typing import Dict, Optional
from pydantic import BaseModel, Field

class TrafficLightStatus(BaseModel):
    """
    State of one approach's signal head.
    """
    state: str = Field(..., description="RED, YELLOW or GREEN")
    duration: int = Field(..., ge=0, description="Planned green hold in seconds")

class IntersectionStatus(BaseModel):
    """
    Snapshot of the intersection as exposed to external consumers.
    """
    timestamp: float = Field(..., description="Timestamp of the tick that produced this state")
    phase: str = Field(..., description="Controller phase")
    emergency_active: bool = Field(..., description="Whether the emergency override was active")
    last_phase_change: float = Field(..., description="Timestamp of the last phase change")
    lights: Dict[str, TrafficLightStatus] = Field(..., description="Signal heads keyed by direction")

class SensorUpdate(BaseModel):
    """
    Presence report from an external sensor.
    """
    detected: bool = Field(..., description="Whether a vehicle is present")
    timestamp: Optional[float] = Field(None, description="Detection time, defaults to server time")
