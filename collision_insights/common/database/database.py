import os
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

# Default to a local sqlite file if not specified
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///data/events.sqlite")

Base = declarative_base()

def create_db_engine(database_url: Optional[str] = None) -> Engine:
    """Creates an engine, making the parent directory of a sqlite file if needed."""
    url = make_url(database_url or DATABASE_URL)
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        parent = os.path.dirname(os.path.abspath(url.database))
        os.makedirs(parent, exist_ok=True)
    return create_engine(url, pool_pre_ping=True)

def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autoflush=False, bind=engine)

def init_db(engine: Engine):
    """Initialize database tables."""
    # Import models here to ensure they are registered with Base
    from . import models
    Base.metadata.create_all(bind=engine)
