"""Database package."""

from avid.database.session import (
    engine,
    create_db_engine,
    get_db,
    get_db_context,
    get_member_repository,
)

__all__ = [
    "engine",
    "create_db_engine",
    "get_db",
    "get_db_context",
    "get_member_repository",
]
