"""
Database diagnostics.

Read-only helpers used by the ``/db`` endpoints to check connectivity
and peek at the stored data.  Table names are never taken from user
input: each allowed table maps to a constant SQL statement.
"""

from typing import Any, Dict, List

from ..core.db import get_connection
from ..schemas.db import SampleTable


SAMPLE_QUERIES: Dict[SampleTable, str] = {
    SampleTable.trainers: (
        "SELECT trainer_id, full_name, created_at, updated_at FROM trainers LIMIT 10"
    ),
    SampleTable.courses: (
        "SELECT course_id, title, description, enroll_date, trainer_id, created_at, updated_at "
        "FROM courses LIMIT 10"
    ),
    SampleTable.course_details: (
        "SELECT course_id, course_title, course_description, enroll_date, trainer_id, "
        "trainer_name, days_since_enrollment FROM course_details LIMIT 10"
    ),
}


class DbService:
    """Connectivity check and table sampling."""

    def ping(self) -> str:
        conn = get_connection()
        try:
            one = conn.execute("SELECT 1").fetchone()[0]
            return f"OK: {one}"
        finally:
            conn.close()

    def list_tables(self) -> List[str]:
        """Return user tables and views ordered by name."""
        conn = get_connection()
        try:
            rows = conn.execute(
                """
                SELECT name FROM sqlite_master
                WHERE type IN ('table', 'view') AND name NOT LIKE 'sqlite_%'
                ORDER BY name
                """
            ).fetchall()
            return [row["name"] for row in rows]
        finally:
            conn.close()

    def sample(self, table: SampleTable) -> List[Dict[str, Any]]:
        conn = get_connection()
        try:
            rows = conn.execute(SAMPLE_QUERIES[table]).fetchall()
            return [dict(row) for row in rows]
        finally:
            conn.close()
