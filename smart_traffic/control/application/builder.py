from omegaconf import DictConfig
from typing import Optional, Dict, List

from ..domain import StatusSink, TimingConfig
from .control_loop import ControlLoop
from .emergency import EmergencyOverride
from .phase_controller import PhaseController
from .sensor_state import SensorState
from ..infrastructure.emergency_trigger import RandomEmergencyTrigger
from ..infrastructure.scheduler import TickScheduler
from ..infrastructure.sensor_feed import RandomSensorFeed
from ..presentation.console_display import ConsoleStatusDisplay
from ...common.config.manager import ConfigManager
from ...common.logging import setup_logger
from ...common.metrics import ControlMetrics

class ControlApplicationBuilder:
    """
    Builder pattern for constructing the intersection controller.
    Centralizes component instantiation and wiring.
    """

    def __init__(self, config: DictConfig):
        self.config = config
        # Hydra-composed profiles arrive without the structured defaults
        self.control_cfg = ConfigManager.resolve_control_config(config.control)
        self.metrics_collector = ControlMetrics()
        self.logger = setup_logger(__name__)

        # Components
        self.timing: Optional[TimingConfig] = None
        self.sensors: Optional[SensorState] = None
        self.emergency: Optional[EmergencyOverride] = None
        self.controller: Optional[PhaseController] = None
        self.sinks: List[StatusSink] = []
        self.loop: Optional[ControlLoop] = None
        self.sensor_feed: Optional[RandomSensorFeed] = None
        self.emergency_trigger: Optional[RandomEmergencyTrigger] = None
        self.scheduler: Optional[TickScheduler] = None

    def build_timing(self) -> 'ControlApplicationBuilder':
        self.timing = ConfigManager.build_timing_config(self.control_cfg)
        self.logger.info(f"Timing: {self.timing.model_dump()}")
        return self

    def build_controller(self) -> 'ControlApplicationBuilder':
        if not self.timing:
            self.build_timing()
        self.sensors = SensorState()
        self.emergency = EmergencyOverride()
        self.controller = PhaseController(self.timing)
        return self

    def build_display(self) -> 'ControlApplicationBuilder':
        if self.control_cfg.get('display', True):
            self.sinks.append(ConsoleStatusDisplay())
        return self

    def build_loop(self) -> ControlLoop:
        if not self.controller:
            self.build_controller()
        self.loop = ControlLoop(
            controller=self.controller,
            sensors=self.sensors,
            emergency=self.emergency,
            sinks=self.sinks,
            metrics_collector=self.metrics_collector
        )
        return self.loop

    def build_sensor_feed(self) -> 'ControlApplicationBuilder':
        feed_cfg = self.control_cfg.get('sensor_feed', {})
        if feed_cfg.get('enabled', False):
            if not self.loop:
                self.build_loop()
            self.sensor_feed = RandomSensorFeed(
                self.sensors,
                detection_probability=feed_cfg.get('detection_probability', 0.2),
                interval_seconds=feed_cfg.get('interval_seconds', 1.0),
                seed=feed_cfg.get('seed', None)
            )
        return self

    def build_emergency_trigger(self) -> 'ControlApplicationBuilder':
        em_cfg = self.control_cfg.get('emergency', {})
        if em_cfg.get('enabled', False):
            if not self.loop:
                self.build_loop()
            self.emergency_trigger = RandomEmergencyTrigger(
                self.emergency,
                probability=em_cfg.get('probability', 0.05),
                hold_seconds=em_cfg.get('hold_seconds', 5.0),
                seed=em_cfg.get('seed', None)
            )
        return self

    def build_scheduler(self) -> TickScheduler:
        if not self.loop:
            self.build_loop()
        hooks = [self.emergency_trigger.step] if self.emergency_trigger else []
        self.scheduler = TickScheduler(
            self.loop,
            period_seconds=self.control_cfg.get('tick_seconds', 1.0),
            pre_tick_hooks=hooks
        )
        return self.scheduler

    def build_all(self) -> TickScheduler:
        self.build_timing().build_controller().build_display()
        self.build_loop()
        return self.build_sensor_feed().build_emergency_trigger().build_scheduler()

    def get_components(self) -> Dict:
        """Returns built components for external use (e.g. API, tests)"""
        return {
            'timing': self.timing,
            'sensors': self.sensors,
            'emergency': self.emergency,
            'controller': self.controller,
            'loop': self.loop,
            'sensor_feed': self.sensor_feed,
            'emergency_trigger': self.emergency_trigger,
            'scheduler': self.scheduler,
            'metrics_collector': self.metrics_collector
        }
