"""
Database initialization and seeding.

This script:
- Creates the members table
- Optionally adds sample members for development/testing
- Can reset the database (drop and recreate)

Usage:
    # Create tables
    python -m avid.database.init_db

    # Reset database (drops all tables and recreates)
    python -m avid.database.init_db --reset

    # Add sample members for testing
    python -m avid.database.init_db --sample-data
"""

import argparse
import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from avid.config import settings
from avid.core.constants import GamblingLimit
from avid.core.security import hash_password
from avid.database.session import engine, get_db_context, get_member_repository
from avid.domain import Address, Email, Height, Member, Weight
from avid.models import create_all_tables, drop_all_tables


def create_tables(reset: bool = False, engine_instance: Optional[Engine] = None) -> None:
    """
    Create all database tables.

    Args:
        reset: If True, drop existing tables first
    """
    engine_instance = engine_instance or engine

    if reset:
        print("🗑️  Dropping existing tables...")
        drop_all_tables(engine_instance)
        print("✅ Tables dropped")

    print("📊 Creating database tables...")
    create_all_tables(engine_instance)
    print("✅ Tables created")


def build_sample_members() -> List[Member]:
    """Sample members used for development and UI testing."""
    return [
        Member(
            username="annabel",
            password=hash_password("annabel-password"),
            address=Address(country="CA", province="ON", city="Toronto", postal_code="M5V 2T6"),
            date_of_birth=date(1990, 4, 1),
            limits=GamblingLimit.LOW.value,
            height=Height.parse("168"),
            weight=Weight.parse("61.5"),
            body_type="athletic",
            ethnicity="caucasian",
            email=Email.parse("annabel@example.com"),
        ),
        Member(
            username="joanna",
            password=hash_password("joanna-password"),
            address=Address(country="CA", province="QC", city="Montreal", postal_code="H2X 1Y4"),
            date_of_birth=date(1985, 11, 23),
            limits=GamblingLimit.MEDIUM.value,
            height=Height.parse("175"),
            weight=Weight.parse("70"),
            body_type="average",
            ethnicity="hispanic",
            email=Email.parse("joanna@example.com"),
        ),
        Member(
            username="marcus",
            password=hash_password("marcus-password"),
            address=Address(country="CA", province="BC", city="Vancouver", postal_code="V6B 1A1"),
            date_of_birth=date(1979, 7, 14),
            limits=GamblingLimit.SELF_EXCLUDED.value,
            height=Height.parse("182.5"),
            weight=Weight.parse("88"),
            body_type="stocky",
            ethnicity="black",
            email=Email.parse("marcus@example.com"),
        ),
    ]


def seed_sample_data(engine_instance: Optional[Engine] = None) -> int:
    """
    Seed sample members for development and testing.

    Members that already exist are skipped.

    Returns:
        Number of members inserted
    """
    print("\n🌱 Seeding sample members...")
    inserted = 0

    for member in build_sample_members():
        try:
            # One transaction per member so a duplicate does not undo the others
            with get_db_context(engine_instance) as conn:
                get_member_repository(conn).add(member)
            inserted += 1
            print(f"  ✅ Created member: {member.username}")
        except IntegrityError:
            print(f"  ⏭️  Member '{member.username}' already exists (skipping)")

    print("✅ Sample members seeded")
    return inserted


def print_database_status(engine_instance: Optional[Engine] = None) -> None:
    """Print current database status and member count."""
    print("\n" + "=" * 60)
    print("📊 Database Status")
    print("=" * 60)

    with get_db_context(engine_instance) as conn:
        members = get_member_repository(conn)
        members_count = members.count()
        print(f"  Members: {members_count}")

        if members_count > 0:
            print("\n  Members:")
            for member in members.find_all(0, settings.default_page_size):
                print(f"    • {member.username} <{member.email}>")

    print("=" * 60)


def initialize_database(
    reset: bool = False,
    sample_data: bool = False,
    engine_instance: Optional[Engine] = None
) -> None:
    """
    Initialize the database.

    Args:
        reset: Drop existing tables before creating
        sample_data: Add sample members for testing
    """
    print("=" * 60)
    print("🗄️  Database Initialization")
    print("=" * 60)

    create_tables(reset=reset, engine_instance=engine_instance)

    if sample_data:
        seed_sample_data(engine_instance)

    print_database_status(engine_instance)

    print("\n✅ Database initialization complete!")


def main():
    """Main entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Initialize and seed the members database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create the members table
  python -m avid.database.init_db

  # Reset database (drop all tables and recreate)
  python -m avid.database.init_db --reset

  # Full reset with sample members
  python -m avid.database.init_db --reset --sample-data
        """
    )

    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop existing tables before creating (WARNING: deletes all data!)"
    )

    parser.add_argument(
        "--sample-data",
        action="store_true",
        help="Add sample members for development/testing"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if args.reset:
        print("⚠️  WARNING: This will DELETE ALL DATA in the database!")
        response = input("Are you sure? Type 'yes' to continue: ")
        if response.lower() != 'yes':
            print("❌ Aborted")
            return

    initialize_database(reset=args.reset, sample_data=args.sample_data)


if __name__ == "__main__":
    main()
