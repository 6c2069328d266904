import threading
from ...common.logging import setup_logger

class EmergencyOverride:
    """
    Priority flag raised by an external trigger (simulated feed, API call).
    The control loop reads it once per tick.
    """

    def __init__(self):
        self._active = threading.Event()
        self._lock = threading.Lock()
        self.activations = 0
        self.logger = setup_logger(__name__)

    @property
    def is_active(self) -> bool:
        return self._active.is_set()

    def activate(self):
        with self._lock:
            if self._active.is_set():
                return
            self._active.set()
            self.activations += 1
        self.logger.warning("Emergency override activated: N/S forced green")

    def deactivate(self):
        with self._lock:
            if not self._active.is_set():
                return
            self._active.clear()
        self.logger.warning("Emergency override cleared: resuming normal cycle")
