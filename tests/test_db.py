import pytest

from log_manager_api.app.core.db import MIGRATIONS, init_db, transaction


def test_migrations_are_recorded_once(database):
    init_db()
    with transaction() as conn:
        versions = [row["version"] for row in conn.execute("SELECT version FROM migrations")]
    assert versions == [version for version, _ in MIGRATIONS]


def test_transaction_rolls_back_on_error(database):
    with pytest.raises(RuntimeError):
        with transaction() as conn:
            conn.execute(
                "INSERT INTO logs (message, severity, timestamp) VALUES ('x', 'INFO', '2000-12-12T12:12:12')"
            )
            raise RuntimeError("boom")
    with transaction() as conn:
        assert conn.execute("SELECT COUNT(*) AS count FROM logs").fetchone()["count"] == 0


def test_transaction_commits(database):
    with transaction() as conn:
        conn.execute(
            "INSERT INTO logs (message, severity, timestamp) VALUES ('x', 'INFO', '2000-12-12T12:12:12')"
        )
    with transaction() as conn:
        assert conn.execute("SELECT COUNT(*) AS count FROM logs").fetchone()["count"] == 1
