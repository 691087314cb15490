from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from .config import Settings

IDLE_CONNECTIONS = 5
CONNECTION_LIFETIME_SECONDS = 5 * 60


def normalize_db_url(url: str) -> str:
    # Use psycopg v3 driver with SQLAlchemy
    if url.startswith("postgresql://"):
        return "postgresql+psycopg://" + url[len("postgresql://"):]
    if url.startswith("postgres://"):
        return "postgresql+psycopg://" + url[len("postgres://"):]
    return url


def build_engine(settings: Settings) -> Engine:
    """
    Connection pool bounded by MAX_CONNECTIONS, keeping a few idle
    connections and recycling each one after five minutes.
    """
    url = normalize_db_url(settings.DATABASE_URL)
    if url.startswith("sqlite"):
        # SQLite has no server-side pool to size
        return create_engine(url, connect_args={"check_same_thread": False}, future=True)

    pool_size = min(IDLE_CONNECTIONS, settings.MAX_CONNECTIONS)
    return create_engine(
        url,
        pool_size=pool_size,
        max_overflow=settings.MAX_CONNECTIONS - pool_size,
        pool_recycle=CONNECTION_LIFETIME_SECONDS,
        pool_timeout=settings.TIMEOUT_SECONDS,
        pool_pre_ping=True,
        future=True,  # explicit 2.0-style
    )


def build_sessionmaker(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)


class Base(DeclarativeBase):
    pass
