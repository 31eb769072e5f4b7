"""
MyCosmo Database Configuration
SQLAlchemy engine and session management for the local SQLite store.
"""

import logging
import os
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///mycosmo.db"

# Base class for all models
Base = declarative_base()


class StoreInitializationError(RuntimeError):
    """The observation store could not be opened. Startup cannot continue."""


def get_database_url() -> str:
    """Database URL from the environment, falling back to a local file."""
    return os.getenv("MYCOSMO_DATABASE_URL", DEFAULT_DATABASE_URL)


def create_db_engine(database_url: str) -> Engine:
    """
    Create a SQLAlchemy engine for the given URL.

    In-memory SQLite databases share a single connection so every session
    sees the same data.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url.rstrip("/") == "sqlite:":
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)

    return create_engine(database_url, pool_pre_ping=True)


def init_database(database_url: Optional[str] = None) -> sessionmaker:
    """
    Create tables and return a session factory.

    Raises:
        StoreInitializationError: If the engine or the schema cannot be created
    """
    url = database_url or get_database_url()

    # Register the models on Base.metadata
    from store import models  # noqa: F401

    try:
        engine = create_db_engine(url)
        Base.metadata.create_all(engine)
    except (SQLAlchemyError, OSError) as e:
        logger.critical(f"Could not configure observation store at {url}: {e}")
        raise StoreInitializationError(f"Could not configure observation store: {e}") from e

    logger.info(f"Observation store ready at {url}")
    return sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )
