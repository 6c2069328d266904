"""
Orchestrates one control tick: sensors -> policy -> controller -> sinks.
"""
import logging
import threading
import time
from typing import List, Optional
from ..domain import Direction, IntersectionSnapshot, Phase, StatusSink
from .emergency import EmergencyOverride
from .phase_controller import PhaseController
from .sensor_state import SensorState
from ...common.logging import setup_logger, log_tick_time
from ...common.metrics import ControlMetrics

class ControlLoop:
    """
    Single entry point for both concurrent tasks:
    the sensor feed calls update_presence(), the scheduler calls tick().

    tick() takes an explicit timestamp so it can be driven synchronously
    without real delays.
    """

    def __init__(
        self,
        controller: PhaseController,
        sensors: SensorState,
        emergency: EmergencyOverride,
        sinks: Optional[List[StatusSink]] = None,
        metrics_collector: Optional[ControlMetrics] = None
    ):
        self.controller = controller
        self.sensors = sensors
        self.emergency = emergency
        self.sinks: List[StatusSink] = list(sinks or [])
        self.metrics_collector = metrics_collector
        self.logger = setup_logger(__name__)

        self._lock = threading.Lock()
        self._latest = self._build_snapshot(0.0, emergency_active=False)

    def add_sink(self, sink: StatusSink):
        self.sinks.append(sink)

    def update_presence(self, direction: Direction, detected: bool, timestamp: float):
        self.sensors.set_presence(direction, detected, timestamp)

    @log_tick_time(logging.getLogger(__name__))
    def tick(self, now: float) -> IntersectionSnapshot:
        start = time.perf_counter()
        with self._lock:
            # Flag and sensors are read exactly once per tick
            emergency_active = self.emergency.is_active
            readings = self.sensors.snapshot()
            changed = self.controller.evaluate(now, readings, emergency_active)
            snapshot = self._build_snapshot(now, emergency_active)
            self._latest = snapshot

        if self.metrics_collector:
            self.metrics_collector.record_tick(
                (time.perf_counter() - start) * 1000,
                snapshot.phase.value,
                changed,
                entered_emergency=changed and snapshot.phase is Phase.EMERGENCY
            )

        for sink in self.sinks:
            sink.emit(snapshot)
        return snapshot

    def latest_snapshot(self) -> IntersectionSnapshot:
        with self._lock:
            return self._latest

    def _build_snapshot(self, now: float, emergency_active: bool) -> IntersectionSnapshot:
        return IntersectionSnapshot(
            timestamp=now,
            phase=self.controller.phase,
            lights=self.controller.lights(),
            emergency_active=emergency_active,
            last_phase_change=self.controller.last_phase_change
        )
