from .sensor_feed import RandomSensorFeed
from .emergency_trigger import RandomEmergencyTrigger
from .scheduler import TickScheduler
