import pytest
from pathlib import Path
from smart_traffic.control.application import (
    ControlLoop, EmergencyOverride, PhaseController, SensorState
)
from smart_traffic.control.domain import Direction, SensorReading, TimingConfig
from smart_traffic.common.metrics import ControlMetrics

CONF_DIR = Path(__file__).resolve().parent.parent / "conf"

def make_readings(north=False, south=False, east=False, west=False, now=0.0):
    """Sensor snapshot keyed by direction, in N, S, E, W order."""
    flags = {
        Direction.NORTH: north,
        Direction.SOUTH: south,
        Direction.EAST: east,
        Direction.WEST: west,
    }
    return {
        d: SensorReading(direction=d, presence=p, last_detected_at=now if p else None)
        for d, p in flags.items()
    }

@pytest.fixture
def readings():
    return make_readings

@pytest.fixture
def conf_dir():
    return CONF_DIR

@pytest.fixture
def timing_config():
    return TimingConfig(
        base_green_seconds=30,
        yellow_seconds=5,
        min_green_seconds=10,
        max_green_seconds=60
    )

@pytest.fixture
def controller(timing_config):
    return PhaseController(timing_config)

@pytest.fixture
def control_loop(controller):
    return ControlLoop(
        controller=controller,
        sensors=SensorState(),
        emergency=EmergencyOverride(),
        metrics_collector=ControlMetrics()
    )
