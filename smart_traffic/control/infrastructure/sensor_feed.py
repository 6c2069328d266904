"""
Simulated vehicle presence sensors.
"""
import random
import threading
import time
from typing import Callable, Optional
from ..domain import Direction, PresenceWriter
from ...common.exceptions import SensorFeedError
from ...common.logging import setup_logger

class RandomSensorFeed:
    """
    Reports a vehicle on each approach with a fixed probability every interval.
    Runs on its own thread, independent of the control cadence.
    """

    def __init__(
        self,
        writer: PresenceWriter,
        detection_probability: float = 0.2,
        interval_seconds: float = 1.0,
        seed: Optional[int] = None,
        clock: Callable[[], float] = time.time
    ):
        if not 0.0 <= detection_probability <= 1.0:
            raise SensorFeedError(f"detection_probability must be in [0, 1], got {detection_probability}")
        if interval_seconds <= 0:
            raise SensorFeedError(f"interval_seconds must be positive, got {interval_seconds}")

        self.writer = writer
        self.detection_probability = detection_probability
        self.interval_seconds = interval_seconds
        self.clock = clock
        self._rng = random.Random(seed)
        self.logger = setup_logger(__name__)

        self._stop_event = threading.Event()
        self._worker_thread: Optional[threading.Thread] = None

    def poll_once(self, now: Optional[float] = None):
        """One detection round over all four approaches."""
        now = self.clock() if now is None else now
        for direction in Direction:
            detected = self._rng.random() < self.detection_probability
            self.writer.set_presence(direction, detected, now)

    def start(self):
        if self._worker_thread and self._worker_thread.is_alive():
            return
        self._stop_event.clear()
        self._worker_thread = threading.Thread(
            target=self._feed_worker,
            name="SensorFeed",
            daemon=True
        )
        self._worker_thread.start()
        self.logger.info(f"Sensor feed started (p={self.detection_probability}, every {self.interval_seconds}s)")

    def _feed_worker(self):
        while not self._stop_event.is_set():
            self.poll_once()
            self._stop_event.wait(self.interval_seconds)

    def stop(self):
        """Stops the worker thread."""
        self._stop_event.set()
        if self._worker_thread:
            self._worker_thread.join(timeout=3.0)
            self._worker_thread = None
