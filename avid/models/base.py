"""
Base Model
==========

Declarative base shared by all table definitions.
"""

from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def create_all_tables(engine: Engine) -> None:
    """Create all tables in the database."""
    Base.metadata.create_all(bind=engine)


def drop_all_tables(engine: Engine) -> None:
    """Drop all tables in the database."""
    Base.metadata.drop_all(bind=engine)
