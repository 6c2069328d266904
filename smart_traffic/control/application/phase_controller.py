"""
Phase state machine for a two-axis intersection.
"""
from typing import Dict, Mapping, Optional
from ..domain import (
    Axis, Direction, LightState, Phase, SensorReading,
    TimingConfig, TimingPolicy, TrafficLight
)
from .timing_policy import compute_durations
from ...common.logging import setup_logger

class PhaseController:
    """
    Owns the light states and phase bookkeeping of one intersection.

    Cycle: NS_GREEN -> NS_YELLOW -> EW_GREEN -> EW_YELLOW -> NS_GREEN ...
    EMERGENCY preempts any phase and, once cleared, always resumes at NS_GREEN
    with freshly computed durations; the interrupted phase is not restored.

    Lights are only ever written per axis, so opposing approaches can never
    disagree and at most one axis is non-red.
    """

    def __init__(self, config: TimingConfig, policy: Optional[TimingPolicy] = None):
        self.config = config
        self.policy = policy or compute_durations
        self.logger = setup_logger(__name__)

        self._phase = Phase.ALL_RED
        self._last_phase_change = 0.0
        self._states: Dict[Direction, LightState] = {d: LightState.RED for d in Direction}
        self._durations: Dict[Direction, int] = {d: 0 for d in Direction}

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def last_phase_change(self) -> float:
        return self._last_phase_change

    def duration(self, axis: Axis) -> int:
        return self._durations[axis.members[0]]

    def lights(self) -> Dict[Direction, TrafficLight]:
        return {
            d: TrafficLight(direction=d, state=self._states[d], duration=self._durations[d])
            for d in Direction
        }

    def evaluate(
        self,
        now: float,
        sensors: Mapping[Direction, SensorReading],
        emergency_active: bool
    ) -> bool:
        """
        Applies at most one transition for the given instant.
        Returns True if the phase changed.
        """
        if emergency_active:
            if self._phase is Phase.EMERGENCY:
                return False
            self._enter_emergency(now)
            return True

        if self._phase in (Phase.EMERGENCY, Phase.ALL_RED):
            self._start_green(Axis.NS, now, sensors)
            return True

        elapsed = now - self._last_phase_change
        axis = self._phase.axis

        if self._phase.is_green:
            if elapsed >= self.duration(axis):
                self._set_axis(axis, LightState.YELLOW)
                self._change_phase(Phase.yellow_for(axis), now)
                return True
            return False

        if self._yellow_expired(elapsed):
            self._start_green(axis.opposite, now, sensors)
            return True
        return False

    def _yellow_expired(self, elapsed: float) -> bool:
        # Never within the same instant the yellow started
        if elapsed <= 0:
            return False
        if self.config.enforce_yellow_hold:
            return elapsed >= self.config.yellow_seconds
        return True

    def _start_green(self, axis: Axis, now: float, sensors: Mapping[Direction, SensorReading]):
        self._set_axis(axis.opposite, LightState.RED)
        self._set_axis(axis, LightState.GREEN)
        self._durations = dict(self.policy(sensors, self.config))
        self._change_phase(Phase.green_for(axis), now)
        self.logger.info(
            f"N/S green {self.duration(Axis.NS)}s, E/W green {self.duration(Axis.EW)}s"
        )

    def _enter_emergency(self, now: float):
        self._set_axis(Axis.EW, LightState.RED)
        self._set_axis(Axis.NS, LightState.GREEN)
        self._change_phase(Phase.EMERGENCY, now)

    def _set_axis(self, axis: Axis, state: LightState):
        for direction in axis.members:
            self._states[direction] = state

    def _change_phase(self, phase: Phase, now: float):
        self.logger.info(f"Phase {self._phase.value} -> {phase.value} at {now:.2f}")
        self._phase = phase
        self._last_phase_change = now
