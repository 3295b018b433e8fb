"""
Database models package.

Contains the SQLAlchemy table definitions.
"""

from avid.models.base import Base, create_all_tables, drop_all_tables
from avid.models.member import MemberRecord, members_table

__all__ = [
    "Base",
    "MemberRecord",
    "members_table",
    "create_all_tables",
    "drop_all_tables",
]
