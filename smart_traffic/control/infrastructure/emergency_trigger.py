import random
from typing import Optional
from ..application.emergency import EmergencyOverride
from ...common.exceptions import ConfigurationError

class RandomEmergencyTrigger:
    """
    Simulates emergency vehicles: each step may raise the override, which is
    then held for hold_seconds before being cleared.
    """

    def __init__(
        self,
        override: EmergencyOverride,
        probability: float = 0.05,
        hold_seconds: float = 5.0,
        seed: Optional[int] = None
    ):
        if not 0.0 <= probability <= 1.0:
            raise ConfigurationError(f"Emergency probability must be in [0, 1], got {probability}")
        if hold_seconds < 0:
            raise ConfigurationError(f"hold_seconds cannot be negative, got {hold_seconds}")

        self.override = override
        self.probability = probability
        self.hold_seconds = hold_seconds
        self._rng = random.Random(seed)
        self.activated_at: Optional[float] = None

    def step(self, now: float):
        if self.activated_at is not None:
            if now - self.activated_at >= self.hold_seconds:
                self.override.deactivate()
                self.activated_at = None
            return

        if self._rng.random() < self.probability:
            self.override.activate()
            self.activated_at = now
