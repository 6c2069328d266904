from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pathlib import Path
from typing import List, Optional
from .models import ControlConfig
from ..exceptions import ConfigurationError
from ...control.domain import TimingConfig

class ConfigManager:
    """Loads and validates controller configuration"""

    def __init__(self, config_dir: Path = Path("conf")):
        self.config_dir = Path(config_dir)

    def load_control_config(self, profile: str = "default", overrides: Optional[List[str]] = None) -> DictConfig:
        """Loads conf/control/<profile>.yaml on top of the structured defaults"""
        config_path = self.config_dir / "control" / f"{profile}.yaml"

        if not config_path.exists():
            raise ConfigurationError(f"Config not found: {config_path}")

        try:
            raw = OmegaConf.merge(OmegaConf.load(config_path), OmegaConf.from_dotlist(overrides or []))
        except OmegaConfBaseException as e:
            raise ConfigurationError(f"Invalid control config {config_path}: {e}") from e

        return self.resolve_control_config(raw)

    @staticmethod
    def resolve_control_config(node: DictConfig) -> DictConfig:
        """
        Fills keys a profile leaves out from ControlConfig and validates timing.
        Used for both plain YAML profiles and Hydra-composed `control` nodes.
        """
        try:
            cfg = OmegaConf.merge(OmegaConf.structured(ControlConfig), node)
        except OmegaConfBaseException as e:
            raise ConfigurationError(f"Invalid control config: {e}") from e

        # Fail at startup, not on the first tick
        ConfigManager.build_timing_config(cfg)
        return cfg

    @staticmethod
    def build_timing_config(cfg: DictConfig) -> TimingConfig:
        """Converts the `timing` node into the validated domain model"""
        timing = cfg.timing if "timing" in cfg else cfg
        return TimingConfig(**OmegaConf.to_container(timing, resolve=True))
