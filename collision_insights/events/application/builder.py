from typing import Optional

from omegaconf import DictConfig

from ..domain.repositories import EventRepository
from ..infrastructure import InMemoryStore, JsonFileStore, KeyValueEventRepository, SQLEventRepository
from .services import EventStatisticsService
from ...common.config import ConfigManager
from ...common.logging import setup_logger

logger = setup_logger(__name__)

class EventsApplicationBuilder:
    """
    Builder for the events application.
    Centralizes repository instantiation and service wiring.
    """

    def __init__(self, config: DictConfig):
        self.events_cfg = ConfigManager.validate(config.events)

        self.repository: Optional[EventRepository] = None
        self.service: Optional[EventStatisticsService] = None

    def build_repository(self) -> 'EventsApplicationBuilder':
        store_cfg = self.events_cfg.store
        logger.info(f"Initializing {store_cfg.type} event store...")

        if store_cfg.type == 'sql':
            self.repository = SQLEventRepository(database_url=store_cfg.database_url)
        else:
            store = InMemoryStore() if store_cfg.type == 'memory' else JsonFileStore(store_cfg.path)
            repository = KeyValueEventRepository(store, key=store_cfg.key)
            repository.initialize()
            self.repository = repository
        return self

    def build_service(self) -> EventStatisticsService:
        if not self.repository:
            self.build_repository()

        self.service = EventStatisticsService(
            repository=self.repository,
            trend_days=self.events_cfg.statistics.trend_days,
            default_range=self.events_cfg.statistics.default_range,
            latest_events_range=self.events_cfg.statistics.latest_events_range,
        )
        return self.service
