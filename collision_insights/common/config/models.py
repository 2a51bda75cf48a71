from dataclasses import dataclass, field
from typing import Optional

@dataclass
class StoreConfig:
    type: str = "json"  # memory | json | sql
    path: str = "data/store"
    key: str = "ugandaSafe_events"
    database_url: Optional[str] = None

@dataclass
class StatisticsConfig:
    default_range: str = "month"
    latest_events_range: str = "day"
    trend_days: int = 10

@dataclass
class EventsConfig:
    store: StoreConfig = field(default_factory=StoreConfig)
    statistics: StatisticsConfig = field(default_factory=StatisticsConfig)
    log_level: str = "INFO"

@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000
