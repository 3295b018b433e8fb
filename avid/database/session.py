"""
Database Connection Management
==============================

Handles the engine and the connection/transaction lifecycle.
Repositories receive an open Connection; the helpers here decide
when it commits.
"""

import os
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.pool import StaticPool

from avid.config import settings
from avid.repositories.member import SqlMemberRepository


def create_db_engine(database_url: Optional[str] = None) -> Engine:
    """
    Create and configure the database engine.

    Args:
        database_url: Overrides settings.database_url (tests use "sqlite://")
    """
    database_url = database_url or settings.database_url

    # SQLite-specific configuration
    if database_url.startswith("sqlite"):
        # Ensure data directory exists
        if ":///" in database_url:
            db_path = database_url.split(":///")[1]
            if not db_path.startswith(":memory:"):
                db_dir = os.path.dirname(db_path)
                if db_dir and not os.path.exists(db_dir):
                    os.makedirs(db_dir, exist_ok=True)

        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=settings.app_debug
        )
    else:
        engine = create_engine(database_url, echo=settings.app_debug)

    return engine


# Global engine
engine = create_db_engine()


@contextmanager
def get_db_context(engine_instance: Optional[Engine] = None) -> Generator[Connection, None, None]:
    """
    Context manager for database connections.

    Commits when the block exits normally, rolls back and re-raises
    otherwise.

    Usage:
        with get_db_context() as conn:
            SqlMemberRepository(conn).add(member)
    """
    if engine_instance is None:
        engine_instance = engine

    conn = engine_instance.connect()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def get_db() -> Generator[Connection, None, None]:
    """
    Dependency injection helper.

    Yields a connection and closes it afterwards; the caller commits.
    """
    conn = engine.connect()
    try:
        yield conn
    finally:
        conn.close()


def get_member_repository(conn: Connection) -> SqlMemberRepository:
    """Build the member repository bound to a connection."""
    return SqlMemberRepository(conn)
