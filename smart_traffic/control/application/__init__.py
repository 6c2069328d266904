"""
Application layer: control core.
"""
from .sensor_state import SensorState
from .timing_policy import compute_durations, axis_density
from .phase_controller import PhaseController
from .emergency import EmergencyOverride
from .control_loop import ControlLoop
