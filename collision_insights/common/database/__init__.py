from .database import DATABASE_URL, Base, create_db_engine, create_session_factory, init_db
from .models import CollisionEventDB

__all__ = [
    "DATABASE_URL", "Base", "create_db_engine", "create_session_factory", "init_db",
    "CollisionEventDB"
]
