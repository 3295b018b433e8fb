"""
Data access layer (Repository pattern).

Repositories handle all database queries,
isolating business logic from SQL.
"""

from avid.repositories.base import SqlRepository
from avid.repositories.interfaces import MemberRepository
from avid.repositories.member import SqlMemberRepository

__all__ = [
    "SqlRepository",
    "MemberRepository",
    "SqlMemberRepository",
]
