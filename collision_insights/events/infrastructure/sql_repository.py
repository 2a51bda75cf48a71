import json
from datetime import datetime
from typing import Callable, List, Optional

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from ..domain.entities import CollisionEvent
from .identity import with_identity
from ...common.database import CollisionEventDB, create_db_engine, create_session_factory, init_db
from ...common.exceptions import EventNotFoundError, StoreError
from ...common.logging import setup_logger
from ...common.utils import to_local

logger = setup_logger(__name__)

class SQLEventRepository:
    """
    Stores each event as a JSON document row. Rows come back newest first,
    matching the key-value repository.
    """
    def __init__(
        self,
        database_url: Optional[str] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.clock = clock
        try:
            self.engine = create_db_engine(database_url)
            init_db(self.engine)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to initialize database: {e}") from e
        self.session_factory = create_session_factory(self.engine)

    @staticmethod
    def _to_event(row: CollisionEventDB) -> Optional[CollisionEvent]:
        try:
            return CollisionEvent.model_validate(json.loads(row.payload))
        except (ValueError, ValidationError) as e:
            logger.warning(f"Skipping invalid event row {row.event_id!r}: {e}")
            return None

    def get_all(self) -> List[CollisionEvent]:
        try:
            with self.session_factory() as session:
                rows = session.scalars(
                    select(CollisionEventDB).order_by(CollisionEventDB.seq.desc())
                ).all()
                events = [self._to_event(row) for row in rows]
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to read events: {e}") from e
        return [event for event in events if event is not None]

    def get(self, event_id: str) -> CollisionEvent:
        try:
            with self.session_factory() as session:
                row = session.scalars(
                    select(CollisionEventDB).where(CollisionEventDB.event_id == event_id)
                ).first()
                event = self._to_event(row) if row is not None else None
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to read event {event_id}: {e}") from e
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def append(self, event: CollisionEvent) -> CollisionEvent:
        try:
            with self.session_factory() as session:
                existing_ids = session.scalars(select(CollisionEventDB.event_id)).all()
                created = with_identity(event, self.clock(), existing_ids)
                session.add(CollisionEventDB(
                    event_id=created.id,
                    timestamp=to_local(created.timestamp) if created.timestamp else None,
                    severity=created.severity,
                    payload=json.dumps(created.to_record()),
                ))
                session.commit()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to store event: {e}") from e
        return created
