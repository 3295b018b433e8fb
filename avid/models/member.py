"""
Member table definition.

The repository talks to this table through SQLAlchemy Core
(``MemberRecord.__table__``); the declarative class exists so the
schema lives next to the other models and is created by
``create_all_tables``.

Every column is a string except ``date_of_birth``. Height, weight
and email are stored in their formatted string form.
"""

from datetime import date

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column

from avid.core.constants import MEMBERS_TABLE
from avid.models.base import Base


class MemberRecord(Base):
    """
    Row of the members table.

    Attributes:
        username: Primary key, one row per member
        password: Hashed password
        country, province, city, postal_code: Flattened address
        date_of_birth: Date of birth (DATE)
        limits: Gambling limits
        height, weight: Formatted measurements
        body_type, ethnicity: Free-form descriptors
        email: Validated email address
    """

    __tablename__ = MEMBERS_TABLE

    username: Mapped[str] = mapped_column(String(255), primary_key=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    # Address
    country: Mapped[str] = mapped_column(String(255), nullable=False)
    province: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(32), nullable=False)

    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    limits: Mapped[str] = mapped_column(String(64), nullable=False)
    height: Mapped[str] = mapped_column(String(32), nullable=False)
    weight: Mapped[str] = mapped_column(String(32), nullable=False)
    body_type: Mapped[str] = mapped_column(String(64), nullable=False)
    ethnicity: Mapped[str] = mapped_column(String(64), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        {'comment': 'Registered members'},
    )

    def __repr__(self) -> str:
        return f"<MemberRecord(username='{self.username}')>"


members_table = MemberRecord.__table__
