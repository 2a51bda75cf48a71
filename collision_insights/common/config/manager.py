from omegaconf import DictConfig, OmegaConf
from pathlib import Path

from .models import EventsConfig, ServerConfig
from ..exceptions import ConfigurationError

STORE_TYPES = ("memory", "json", "sql")

class ConfigManager:
    """Centralizes loading and validation of the application configuration"""

    def __init__(self, config_dir: Path = Path("conf")):
        self.config_dir = Path(config_dir)

    def load_events_config(self, profile: str = "default") -> DictConfig:
        """Loads an events profile merged over the structured defaults"""
        config_path = self.config_dir / "events" / f"{profile}.yaml"

        if not config_path.exists():
            raise ConfigurationError(f"Config not found: {config_path}")

        return self.validate(OmegaConf.load(config_path))

    @staticmethod
    def validate(cfg: DictConfig) -> DictConfig:
        """Checks required keys and merges over defaults. Returns the merged config."""
        required_keys = ['store', 'statistics']
        for key in required_keys:
            if key not in cfg:
                raise ConfigurationError(f"Missing required config key: {key}")

        try:
            merged = OmegaConf.merge(OmegaConf.structured(EventsConfig), cfg)
        except Exception as e:
            raise ConfigurationError(f"Invalid events config: {e}") from e

        if merged.store.type not in STORE_TYPES:
            raise ConfigurationError(
                f"Unknown store type '{merged.store.type}', expected one of {STORE_TYPES}"
            )
        if merged.statistics.trend_days < 1:
            raise ConfigurationError("statistics.trend_days must be at least 1")
        return merged

    @staticmethod
    def server_config(cfg: DictConfig) -> DictConfig:
        return OmegaConf.merge(OmegaConf.structured(ServerConfig), cfg.get('server', {}))
