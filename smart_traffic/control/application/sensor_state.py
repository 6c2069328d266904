"""
Thread-safe store of the latest presence reading per approach.
"""
import threading
from typing import Dict
from ..domain import Direction, SensorReading

class SensorState:
    """
    Written by the sensor feed, read by the control loop.
    Each write swaps an immutable SensorReading, so a reader never sees a
    presence flag paired with a timestamp from a different write.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._readings: Dict[Direction, SensorReading] = {
            direction: SensorReading(direction=direction) for direction in Direction
        }

    def set_presence(self, direction: Direction, detected: bool, now: float) -> None:
        with self._lock:
            previous = self._readings[direction]
            self._readings[direction] = SensorReading(
                direction=direction,
                presence=detected,
                last_detected_at=now if detected else previous.last_detected_at
            )

    def reading(self, direction: Direction) -> SensorReading:
        with self._lock:
            return self._readings[direction]

    def snapshot(self) -> Dict[Direction, SensorReading]:
        """All four readings taken under one lock acquisition."""
        with self._lock:
            return dict(self._readings)
