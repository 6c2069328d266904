class TrafficControlError(Exception):
    """Base exception for all intersection control errors."""
    pass

class ConfigurationError(TrafficControlError):
    """Raised when timing or application configuration is invalid."""
    pass

class SensorFeedError(TrafficControlError):
    """Raised when a sensor feed is misconfigured."""
    pass
