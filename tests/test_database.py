import pytest

from avid.database import create_db_engine, get_db_context, get_member_repository
from avid.database.init_db import (
    build_sample_members,
    create_tables,
    initialize_database,
    print_database_status,
    seed_sample_data,
)
from avid.repositories import SqlMemberRepository


def test_create_db_engine_creates_data_directory(tmp_path):
    db_path = tmp_path / "nested" / "members.db"

    db_engine = create_db_engine(f"sqlite:///{db_path}")
    try:
        assert db_path.parent.is_dir()
        create_tables(engine_instance=db_engine)
        assert db_path.exists()
    finally:
        db_engine.dispose()


def test_get_db_context_commits(engine, make_member):
    with get_db_context(engine) as conn:
        get_member_repository(conn).add(make_member("annabel"))

    with get_db_context(engine) as conn:
        assert get_member_repository(conn).find_by_username("annabel") == make_member("annabel")


def test_get_db_context_rolls_back_on_error(engine, make_member):
    with pytest.raises(RuntimeError):
        with get_db_context(engine) as conn:
            get_member_repository(conn).add(make_member("annabel"))
            raise RuntimeError("boom")

    with get_db_context(engine) as conn:
        assert get_member_repository(conn).count() == 0


def test_get_member_repository_binds_connection(engine):
    with get_db_context(engine) as conn:
        repository = get_member_repository(conn)
        assert isinstance(repository, SqlMemberRepository)
        assert repository.get_connection() is conn


def test_create_tables_reset_drops_rows(engine, make_member):
    with get_db_context(engine) as conn:
        get_member_repository(conn).add(make_member("annabel"))

    create_tables(reset=True, engine_instance=engine)

    with get_db_context(engine) as conn:
        assert get_member_repository(conn).count() == 0


def test_seed_sample_data_skips_existing_members(engine):
    assert seed_sample_data(engine) == len(build_sample_members())
    assert seed_sample_data(engine) == 0

    with get_db_context(engine) as conn:
        assert get_member_repository(conn).count() == len(build_sample_members())


def test_sample_members_have_hashed_passwords():
    from avid.core.security import verify_password

    annabel = build_sample_members()[0]
    assert annabel.password != "annabel-password"
    assert verify_password("annabel-password", annabel.password)


def test_initialize_database_reports_status(engine, capsys):
    initialize_database(sample_data=True, engine_instance=engine)

    out = capsys.readouterr().out
    assert "Members: 3" in out
    assert "annabel <annabel@example.com>" in out


def test_print_database_status_on_empty_table(engine, capsys):
    print_database_status(engine)

    assert "Members: 0" in capsys.readouterr().out


def test_sqlite_engine_sets_no_connection_pragmas(engine):
    with engine.connect() as conn:
        assert conn.exec_driver_sql("PRAGMA foreign_keys").scalar() == 0
