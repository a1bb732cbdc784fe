"""
SQLite database integration and simple migration system.

This module provides ``get_connection`` for opening a connection,
the ``transaction`` context manager that scopes one unit of work,
``init_db`` which applies migrations on application start, and the
``get_db`` dependency used by the API routes.

Every request works on exactly one connection inside one transaction:
either all writes of the request are committed or none are.  The
migration mechanism stores applied versions in the ``migrations``
table and executes newer migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings

logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: users and logs
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL UNIQUE,
            birthdate TEXT NOT NULL,
            weight REAL NOT NULL,
            height REAL NOT NULL,
            favourite_color TEXT NOT NULL,
            bmi REAL NOT NULL
        );

        CREATE TABLE IF NOT EXISTS logs (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            message TEXT NOT NULL,
            severity TEXT NOT NULL,
            timestamp TEXT NOT NULL,
            user_name TEXT
        );
        """,
    ),
    # Migration 2: lookups used by the referential guards
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_logs_user_name ON logs(user_name);
        CREATE INDEX IF NOT EXISTS idx_logs_timestamp ON logs(timestamp);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # log_manager_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be read by
    name.  ``check_same_thread`` is disabled because FastAPI may open
    the connection in its threadpool and use it on the event loop.
    """
    conn = sqlite3.connect(get_database_path(), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def transaction() -> Iterator[sqlite3.Connection]:
    """Yield a connection; commit on success, roll back on any error."""
    conn = get_connection()
    try:
        yield conn
        conn.commit()
    except BaseException:
        conn.rollback()
        raise
    finally:
        conn.close()


def get_db() -> Iterator[sqlite3.Connection]:
    """FastAPI dependency wrapping one request in a transaction."""
    with transaction() as conn:
        yield conn


def init_db() -> None:
    """Create the database file if needed and apply pending migrations."""
    with transaction() as conn:
        cursor = conn.cursor()
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                # executescript commits implicitly, so each migration is
                # recorded right after it ran.
                cursor.executescript(sql)
                cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                logger.info("Applied database migration %s", version)
                current_version = version
