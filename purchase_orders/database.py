"""Database configuration and session management."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """Base class for all database models."""


def create_db_engine(database_url: str) -> Engine:
    """Create an engine; SQLite shares one connection so in-memory data survives."""
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        database_url,
        pool_size=20,
        max_overflow=30,
        pool_pre_ping=True,  # Verify connections before use
        pool_recycle=3600,
    )


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """
    Build a session factory and make sure the tables exist.

    Args:
        database_url: SQLAlchemy database URL

    Returns:
        Session factory bound to a new engine
    """
    # Registers the ORM tables on Base.metadata
    from purchase_orders import models  # noqa: F401

    engine = create_db_engine(database_url)
    Base.metadata.create_all(bind=engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)
