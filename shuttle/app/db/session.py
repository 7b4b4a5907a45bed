"""Engine and session factory; services receive the factory as a session provider."""

from typing import Callable

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from shuttle.app.core.settings import get_settings

SessionProvider = Callable[[], Session]

settings = get_settings()

if settings.is_sqlite:
    engine = create_engine(settings.database_url, connect_args={"check_same_thread": False})

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

else:
    engine = create_engine(
        settings.database_url,
        pool_size=settings.pool_size,
        pool_timeout=settings.pool_timeout,
        pool_pre_ping=True,
    )

SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_session_provider() -> SessionProvider:
    """FastAPI dependency returning the factory each logical operation draws its session from."""
    return SessionLocal
