from .manager import ConfigManager
from .models import EventsConfig, StatisticsConfig, StoreConfig, ServerConfig

__all__ = ["ConfigManager", "EventsConfig", "StatisticsConfig", "StoreConfig", "ServerConfig"]
