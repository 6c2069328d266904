from dataclasses import dataclass, field
from typing import Dict, List
import threading
import time

@dataclass
class ControlPerformanceMetrics:
    """Controller runtime metrics"""
    ticks: int
    phase_changes: int
    emergency_entries: int
    avg_tick_time_ms: float
    uptime_seconds: float
    ticks_per_phase: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {
            'ticks': self.ticks,
            'phase_changes': self.phase_changes,
            'emergency_entries': self.emergency_entries,
            'avg_tick_time_ms': self.avg_tick_time_ms,
            'uptime_seconds': self.uptime_seconds,
            'ticks_per_phase': dict(self.ticks_per_phase)
        }


class ControlMetrics:
    """
    Collects and aggregates control loop metrics.
    The scheduler thread records while API requests read, so both go through one lock.
    """

    def __init__(self, max_samples: int = 1000):
        self.tick_times: List[float] = []
        self.max_samples = max_samples
        self.ticks = 0
        self.phase_changes = 0
        self.emergency_entries = 0
        self.ticks_per_phase: Dict[str, int] = {}
        self.start_time = time.time()
        self._lock = threading.Lock()

    def record_tick(self, duration_ms: float, phase: str, changed: bool, entered_emergency: bool = False):
        with self._lock:
            self.ticks += 1
            self.tick_times.append(duration_ms)
            self.ticks_per_phase[phase] = self.ticks_per_phase.get(phase, 0) + 1
            if changed:
                self.phase_changes += 1
            if entered_emergency:
                self.emergency_entries += 1
            # Keep buffer size manageable
            if len(self.tick_times) > self.max_samples:
                self.tick_times.pop(0)

    def get_metrics(self) -> ControlPerformanceMetrics:
        with self._lock:
            avg_tick = sum(self.tick_times) / len(self.tick_times) if self.tick_times else 0.0
            return ControlPerformanceMetrics(
                ticks=self.ticks,
                phase_changes=self.phase_changes,
                emergency_entries=self.emergency_entries,
                avg_tick_time_ms=avg_tick,
                uptime_seconds=time.time() - self.start_time,
                ticks_per_phase=dict(self.ticks_per_phase)
            )
