"""
Database setup for the SQL book store.
Provides SQLAlchemy engine/session utilities; SQLite unless DATABASE_URL says otherwise.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from settings import settings


def make_engine(database_url: str):
    """Create an engine; SQLite connections may be shared across FastAPI threads."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # check_same_thread=False allows usage across FastAPI threads
        connect_args = {"check_same_thread": False}
    return create_engine(database_url, connect_args=connect_args)


engine = make_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
Base = declarative_base()


def init_db(bind=None) -> None:
    """Create tables if they don't exist."""
    from repositories import models  # noqa: F401  Ensures models are registered

    Base.metadata.create_all(bind=bind or engine)
