"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``, ``get_cursor``) and for applying migrations on
application start (``init_db``).  It uses SQLite as a lightweight
embedded database; to switch to another DBMS you would replace the
connection logic and adapt the SQL in the repositories.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
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
    # Migration 1: trainers and courses
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS trainers (
            trainer_id INTEGER PRIMARY KEY AUTOINCREMENT,
            full_name TEXT NOT NULL CHECK (length(full_name) <= 100),
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE INDEX IF NOT EXISTS idx_trainer_name ON trainers(full_name);

        CREATE TABLE IF NOT EXISTS courses (
            course_id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL CHECK (length(title) <= 50),
            description TEXT NOT NULL,
            enroll_date DATE NOT NULL,
            trainer_id INTEGER NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(trainer_id) REFERENCES trainers(trainer_id)
        );

        CREATE INDEX IF NOT EXISTS idx_course_title ON courses(title);
        CREATE INDEX IF NOT EXISTS idx_course_enroll_date ON courses(enroll_date);
        CREATE INDEX IF NOT EXISTS idx_course_trainer ON courses(trainer_id);
        """,
    ),
    # Migration 2: reporting view joining courses with their trainer
    (
        2,
        """
        CREATE VIEW IF NOT EXISTS course_details AS
        SELECT
            c.course_id AS course_id,
            c.title AS course_title,
            c.description AS course_description,
            c.enroll_date AS enroll_date,
            t.trainer_id AS trainer_id,
            t.full_name AS trainer_name,
            CAST(julianday('now') - julianday(c.enroll_date) AS INTEGER) AS days_since_enrollment
        FROM courses c
        JOIN trainers t ON t.trainer_id = c.trainer_id;
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
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.  No
    type detection is enabled; dates and timestamps come back as the
    ISO strings they were stored as and are parsed by the repositories.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    # SQLite ignores REFERENCES clauses unless this is enabled on every
    # connection.
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  If you add a new migration, append it with an
    incremented version number.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying migration %s", version)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
