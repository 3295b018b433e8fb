import os
from datetime import date

import pytest

# Keep the module-level engine in memory instead of ./data/avid.db
os.environ.setdefault("DATABASE_URL", "sqlite://")

from avid.database.session import create_db_engine
from avid.domain import Address, Email, Height, Member, Weight
from avid.models import create_all_tables
from avid.repositories import SqlMemberRepository


@pytest.fixture
def engine():
    """Fresh in-memory database with the members table."""
    db_engine = create_db_engine("sqlite://")
    create_all_tables(db_engine)
    try:
        yield db_engine
    finally:
        db_engine.dispose()


@pytest.fixture
def connection(engine):
    """Connection inside a transaction that is rolled back after the test."""
    conn = engine.connect()
    trans = conn.begin()
    try:
        yield conn
    finally:
        trans.rollback()
        conn.close()


@pytest.fixture
def repository(connection):
    return SqlMemberRepository(connection)


@pytest.fixture
def make_member():
    def _make(username: str = "annabel", **overrides) -> Member:
        fields = dict(
            username=username,
            password="$2b$12$notarealhashbutastring",
            address=Address(country="CA", province="ON", city="Toronto", postal_code="M5V 2T6"),
            date_of_birth=date(1990, 4, 1),
            limits="low",
            height=Height.parse("168"),
            weight=Weight.parse("61.5"),
            body_type="athletic",
            ethnicity="caucasian",
        )
        fields.update(overrides)
        if "email" not in fields:
            fields["email"] = Email.parse(f"{username or 'member'}@example.com")
        return Member(**fields)

    return _make
