"""
HTTP interface to a running intersection controller.
"""
import time
from typing import Optional
from fastapi import FastAPI, Depends, HTTPException
from ..application.control_loop import ControlLoop
from ..domain import Direction, IntersectionSnapshot
from ...common.schemas import IntersectionStatus, SensorUpdate, TrafficLightStatus

app = FastAPI(title="Smart Intersection Control API")

class ControlService:
    """
    Service layer for the Control API.
    Wraps the control loop's two write contracts and its latest snapshot.
    """
    def __init__(self, loop: ControlLoop):
        self.loop = loop

    def get_status(self) -> IntersectionStatus:
        return to_status(self.loop.latest_snapshot())

    def get_metrics(self):
        if self.loop.metrics_collector:
            metrics = self.loop.metrics_collector.get_metrics().to_dict()
            # Flag raises, counted even when no tick ran while it was up
            metrics['emergency_activations'] = self.loop.emergency.activations
            return metrics
        return {"error": "Metrics not available"}

    def update_sensor(self, direction: Direction, update: SensorUpdate):
        timestamp = update.timestamp if update.timestamp is not None else time.time()
        self.loop.update_presence(direction, update.detected, timestamp)
        return self.loop.sensors.reading(direction)

    def set_emergency(self, active: bool):
        if active:
            self.loop.emergency.activate()
        else:
            self.loop.emergency.deactivate()
        return self.loop.emergency.is_active

def to_status(snapshot: IntersectionSnapshot) -> IntersectionStatus:
    return IntersectionStatus(
        timestamp=snapshot.timestamp,
        phase=snapshot.phase.value,
        emergency_active=snapshot.emergency_active,
        last_phase_change=snapshot.last_phase_change,
        lights={
            d.value: TrafficLightStatus(state=light.state.value, duration=light.duration)
            for d, light in snapshot.lights.items()
        }
    )

# Singleton instance
_service: Optional[ControlService] = None

def init_service(loop: ControlLoop) -> ControlService:
    global _service
    _service = ControlService(loop)
    return _service

def get_control_service() -> ControlService:
    if _service is None:
        raise HTTPException(status_code=503, detail="Control service not initialized")
    return _service

def parse_direction(direction: str) -> Direction:
    try:
        return Direction[direction.upper()]
    except KeyError:
        raise HTTPException(status_code=422, detail=f"Unknown direction: {direction}")

@app.get("/status", response_model=IntersectionStatus)
def get_status(service: ControlService = Depends(get_control_service)):
    return service.get_status()

@app.get("/metrics")
def get_metrics(service: ControlService = Depends(get_control_service)):
    return service.get_metrics()

@app.post("/sensors/{direction}")
def update_sensor(
    update: SensorUpdate,
    direction: Direction = Depends(parse_direction),
    service: ControlService = Depends(get_control_service)
):
    reading = service.update_sensor(direction, update)
    return {
        "direction": direction.value,
        "presence": reading.presence,
        "last_detected_at": reading.last_detected_at
    }

@app.post("/emergency/activate")
def activate_emergency(service: ControlService = Depends(get_control_service)):
    return {"emergency_active": service.set_emergency(True)}

@app.post("/emergency/deactivate")
def deactivate_emergency(service: ControlService = Depends(get_control_service)):
    return {"emergency_active": service.set_emergency(False)}
