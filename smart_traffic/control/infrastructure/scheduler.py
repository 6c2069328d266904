"""
Fixed-cadence driver for the control loop.
"""
import threading
import time
from typing import Callable, List, Optional
from ..application.control_loop import ControlLoop
from ..domain import IntersectionSnapshot
from ...common.logging import setup_logger

class TickScheduler:
    """
    Calls ControlLoop.tick() every period on a background thread.
    Pre-tick hooks (e.g. an emergency trigger) run just before each tick
    with the same timestamp.
    """

    def __init__(
        self,
        loop: ControlLoop,
        period_seconds: float = 1.0,
        clock: Callable[[], float] = time.time,
        pre_tick_hooks: Optional[List[Callable[[float], None]]] = None
    ):
        self.loop = loop
        self.period_seconds = period_seconds
        self.clock = clock
        self.pre_tick_hooks = list(pre_tick_hooks or [])
        self.ticks = 0
        self.logger = setup_logger(__name__)

        self._stop_event = threading.Event()
        self._worker_thread: Optional[threading.Thread] = None

    def run_once(self) -> IntersectionSnapshot:
        now = self.clock()
        for hook in self.pre_tick_hooks:
            hook(now)
        snapshot = self.loop.tick(now)
        self.ticks += 1
        return snapshot

    def run(self, max_ticks: Optional[int] = None):
        """Blocking loop. Returns after max_ticks or when stop() is called."""
        done = 0
        while not self._stop_event.is_set():
            if max_ticks is not None and done >= max_ticks:
                break
            self.run_once()
            done += 1
            if max_ticks is not None and done >= max_ticks:
                break
            self._stop_event.wait(self.period_seconds)

    def start(self):
        if self._worker_thread and self._worker_thread.is_alive():
            return
        self._stop_event.clear()
        self._worker_thread = threading.Thread(
            target=self.run,
            name="ControlScheduler",
            daemon=True
        )
        self._worker_thread.start()
        self.logger.info(f"Control scheduler started (every {self.period_seconds}s)")

    def stop(self):
        self._stop_event.set()
        if self._worker_thread:
            self._worker_thread.join(timeout=3.0)
            self._worker_thread = None

    @property
    def is_running(self) -> bool:
        return self._worker_thread is not None and self._worker_thread.is_alive()
