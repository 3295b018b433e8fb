"""
SQL-backed member repository.

Maps Member entities to rows of the ``members`` table:
- extraction flattens a Member into column → value pairs, each
  column bound with a fixed SQL type
- hydration rebuilds the Address, Height, Weight and Email
  value objects from a row

Every operation is a single statement on the injected connection.
Database errors (duplicate username, lost connection, ...) are
raised unchanged to the caller.
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import Date, String, Table, bindparam, delete, insert, literal, update
from sqlalchemy.types import TypeEngine

from avid.core.constants import MEMBER_ALIAS, MEMBER_COLUMNS
from avid.domain.member import Member
from avid.domain.value_objects import Address, Email, Height, Weight
from avid.models.member import members_table
from avid.repositories.base import SqlRepository
from avid.repositories.interfaces import MemberRepository

logger = logging.getLogger(__name__)


class SqlMemberRepository(SqlRepository, MemberRepository):
    """
    Member repository on top of a SQLAlchemy Connection.

    Example:
        with get_db_context() as conn:
            members = SqlMemberRepository(conn)
            members.add(member)
            found = members.find_by_username("annabel")
    """

    def get_table(self) -> Table:
        return members_table

    def get_alias(self) -> str:
        return MEMBER_ALIAS

    # ========================================
    # Writes
    # ========================================

    def add(self, member: Member) -> int:
        """
        Insert a new member.

        Returns:
            Affected rows

        Raises:
            sqlalchemy.exc.IntegrityError: If the username already exists
        """
        statement = insert(self.get_table()).values(self._bind_data(member))
        affected = self.execute(statement).rowcount
        logger.debug("Inserted member %s (%d row(s))", member.username, affected)
        return affected

    def update(self, member: Member) -> int:
        """
        Replace the whole row of the member with the same username.

        Returns:
            Affected rows, 0 when no member has this username
        """
        table = self.get_table()
        statement = (
            update(table)
            .where(table.c.username == member.username)
            .values(self._bind_data(member))
        )
        affected = self.execute(statement).rowcount
        logger.debug("Updated member %s (%d row(s))", member.username, affected)
        return affected

    def remove(self, member: Member) -> int:
        """
        Delete the member with the same username.

        Returns:
            Affected rows, 0 when no member has this username
        """
        table = self.get_table()
        statement = delete(table).where(table.c.username == member.username)
        affected = self.execute(statement).rowcount
        logger.debug("Removed member %s (%d row(s))", member.username, affected)
        return affected

    # ========================================
    # Reads
    # ========================================

    def find_by_username(self, username: str) -> Optional[Member]:
        query = self.get_base_query().where(self.alias.c.username == bindparam("username"))
        rows = self.execute(query, {"username": username}).mappings().all()
        return self.hydrate(rows[0]) if rows else None

    def search(self, keyword: str, first: int = 0, max_results: Optional[int] = None) -> List[Member]:
        """
        Find members whose username contains keyword.

        Wildcards in keyword are matched literally. Case sensitivity
        follows the database collation (SQLite LIKE ignores ASCII case).
        """
        query = self.get_base_query(first, max_results).where(self._username_contains(keyword))
        rows = self.execute(query).mappings().all()
        return self.hydrate_all(rows)

    def get_search_count(self, keyword: str) -> int:
        query = self.get_count_query().where(self._username_contains(keyword))
        return self.fetch_scalar_count(query)

    def count(self) -> int:
        return self.fetch_scalar_count(self.get_count_query())

    def find_all(self, first: int = 0, max_results: Optional[int] = None) -> List[Member]:
        rows = self.execute(self.get_base_query(first, max_results)).mappings().all()
        return self.hydrate_all(rows)

    # ========================================
    # Hydration / Extraction
    # ========================================

    def hydrate(self, row: Mapping[str, Any]) -> Member:
        """
        Build a Member from a members row.

        Raises:
            ValueError: If a stored value fails value-object validation
        """
        return Member(
            username=row["username"],
            password=row["password"],
            address=Address(
                country=row["country"],
                province=row["province"],
                city=row["city"],
                postal_code=row["postal_code"],
            ),
            date_of_birth=_to_date(row["date_of_birth"]),
            limits=row["limits"],
            height=Height.parse(row["height"]),
            weight=Weight.parse(row["weight"]),
            body_type=row["body_type"],
            ethnicity=row["ethnicity"],
            email=Email.parse(row["email"]),
        )

    def extract_data(self, member: Member) -> Dict[str, Any]:
        """Flatten a Member into column → value pairs."""
        return {
            "username": member.username,
            "password": member.password,
            "country": member.address.country,
            "province": member.address.province,
            "city": member.address.city,
            "postal_code": member.address.postal_code,
            "date_of_birth": member.date_of_birth,
            "limits": member.limits,
            "height": member.height.format(),
            "weight": member.weight.format(),
            "body_type": member.body_type,
            "ethnicity": member.ethnicity,
            "email": member.email.format(),
        }

    @staticmethod
    def get_data_types() -> Dict[str, TypeEngine]:
        """SQL type bound to each column on writes."""
        return {
            column: Date() if column == "date_of_birth" else String()
            for column in MEMBER_COLUMNS
        }

    def _bind_data(self, member: Member) -> Dict[str, Any]:
        types = self.get_data_types()
        return {
            column: literal(value, types[column])
            for column, value in self.extract_data(member).items()
        }

    def _username_contains(self, keyword: str):
        return self.alias.c.username.contains(keyword, autoescape=True)


def _to_date(value: Any) -> date:
    """
    Dates come back as date objects from typed columns, as ISO
    YYYY-MM-DD strings otherwise.

    Raises:
        ValueError: If a string value is not exactly an ISO date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))
