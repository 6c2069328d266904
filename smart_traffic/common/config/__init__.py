from .manager import ConfigManager
from .models import ControlConfig, TimingSettings, SensorFeedSettings, EmergencySettings, ServerSettings
