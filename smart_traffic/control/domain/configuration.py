from pydantic import BaseModel, Field, ConfigDict, model_validator
from ...common.exceptions import ConfigurationError

class TimingConfig(BaseModel):
    """
    Signal timing for one intersection, supplied once at startup.
    """
    base_green_seconds: int = Field(30, description="Green hold when both axes carry similar traffic")
    yellow_seconds: int = Field(5, description="Yellow clearance interval")
    min_green_seconds: int = Field(10, description="Lower bound for any green hold")
    max_green_seconds: int = Field(60, description="Upper bound for any green hold")
    enforce_yellow_hold: bool = Field(
        False,
        description="Keep yellow for yellow_seconds instead of switching on the next tick"
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_bounds(self) -> "TimingConfig":
        if self.min_green_seconds <= 0:
            raise ConfigurationError(
                f"min_green_seconds must be positive, got {self.min_green_seconds}"
            )
        if self.min_green_seconds > self.base_green_seconds:
            raise ConfigurationError(
                f"min_green_seconds ({self.min_green_seconds}) exceeds "
                f"base_green_seconds ({self.base_green_seconds})"
            )
        if self.base_green_seconds > self.max_green_seconds:
            raise ConfigurationError(
                f"base_green_seconds ({self.base_green_seconds}) exceeds "
                f"max_green_seconds ({self.max_green_seconds})"
            )
        if self.yellow_seconds < 0:
            raise ConfigurationError(f"yellow_seconds cannot be negative, got {self.yellow_seconds}")
        return self

    def clamp(self, seconds: int) -> int:
        return max(self.min_green_seconds, min(self.max_green_seconds, seconds))
