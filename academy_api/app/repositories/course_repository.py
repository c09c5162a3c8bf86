import sqlite3
from datetime import date
from typing import List, Optional

from ..core.db import get_connection
from ..models.course import CourseEntity
from ..models.trainer import TrainerEntity
from ._convert import parse_date, parse_timestamp

# Courses are always loaded together with the owning trainer's name so
# the entity carries a usable trainer reference.
_SELECT = """
    SELECT c.course_id, c.title, c.description, c.enroll_date, c.trainer_id,
           c.created_at, c.updated_at, t.full_name AS trainer_name
    FROM courses c
    LEFT JOIN trainers t ON t.trainer_id = c.trainer_id
"""


class CourseRepository:
    """Stores and loads ``CourseEntity`` rows from the ``courses`` table.

    Besides the basic save/find/delete operations the repository offers
    a few read‑only filters (by trainer, by title or description
    substring, by enrollment date) used by the search endpoints.
    """

    def save(self, course: CourseEntity) -> CourseEntity:
        """Insert or update a course and return the stored row.

        Only the trainer's id is written; the trainer must already
        exist, otherwise SQLite raises ``sqlite3.IntegrityError``.
        """
        enroll_date = course.enroll_date.isoformat() if course.enroll_date else None
        conn = get_connection()
        try:
            cursor = conn.cursor()
            if course.id is None:
                cursor.execute(
                    """
                    INSERT INTO courses (title, description, enroll_date, trainer_id)
                    VALUES (?, ?, ?, ?)
                    """,
                    (course.title, course.description, enroll_date, course.trainer_id),
                )
                course_id = cursor.lastrowid
            else:
                cursor.execute(
                    """
                    UPDATE courses
                    SET title = ?, description = ?, enroll_date = ?, trainer_id = ?,
                        updated_at = CURRENT_TIMESTAMP
                    WHERE course_id = ?
                    """,
                    (course.title, course.description, enroll_date, course.trainer_id, course.id),
                )
                if cursor.rowcount == 0:
                    cursor.execute(
                        """
                        INSERT INTO courses (course_id, title, description, enroll_date, trainer_id)
                        VALUES (?, ?, ?, ?, ?)
                        """,
                        (course.id, course.title, course.description, enroll_date, course.trainer_id),
                    )
                course_id = course.id
            conn.commit()
            row = cursor.execute(
                f"{_SELECT} WHERE c.course_id = ?", (course_id,)
            ).fetchone()
            return self._row_to_entity(row)
        finally:
            conn.close()

    def find_by_id(self, course_id: int) -> Optional[CourseEntity]:
        rows = self._fetch("WHERE c.course_id = ?", (course_id,))
        return rows[0] if rows else None

    def find_all(self) -> List[CourseEntity]:
        return self._fetch("ORDER BY c.course_id")

    def exists_by_id(self, course_id: int) -> bool:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT 1 FROM courses WHERE course_id = ?", (course_id,)
            ).fetchone()
            return row is not None
        finally:
            conn.close()

    def delete_by_id(self, course_id: int) -> None:
        conn = get_connection()
        try:
            conn.execute("DELETE FROM courses WHERE course_id = ?", (course_id,))
            conn.commit()
        finally:
            conn.close()

    def find_by_trainer_id(self, trainer_id: int) -> List[CourseEntity]:
        return self._fetch("WHERE c.trainer_id = ? ORDER BY c.course_id", (trainer_id,))

    def find_by_title_containing(self, title: str) -> List[CourseEntity]:
        # instr() keeps the match case-sensitive, unlike LIKE
        return self._fetch("WHERE instr(c.title, ?) > 0 ORDER BY c.course_id", (title,))

    def find_by_description_containing(self, description: str) -> List[CourseEntity]:
        return self._fetch(
            "WHERE instr(c.description, ?) > 0 ORDER BY c.course_id", (description,)
        )

    def find_by_trainer_id_and_enroll_date_after(
        self, trainer_id: int, enroll_date: date
    ) -> List[CourseEntity]:
        return self._fetch(
            "WHERE c.trainer_id = ? AND c.enroll_date > ? ORDER BY c.enroll_date, c.course_id",
            (trainer_id, enroll_date.isoformat()),
        )

    def count_by_trainer_id(self, trainer_id: int) -> int:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT COUNT(*) AS total FROM courses WHERE trainer_id = ?", (trainer_id,)
            ).fetchone()
            return row["total"]
        finally:
            conn.close()

    def exists_by_title_ignore_case(self, title: str) -> bool:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT 1 FROM courses WHERE lower(title) = lower(?)", (title,)
            ).fetchone()
            return row is not None
        finally:
            conn.close()

    def _fetch(self, clause: str, params: tuple = ()) -> List[CourseEntity]:
        conn = get_connection()
        try:
            rows = conn.execute(f"{_SELECT} {clause}", params).fetchall()
            return [self._row_to_entity(row) for row in rows]
        finally:
            conn.close()

    @staticmethod
    def _row_to_entity(row: sqlite3.Row) -> CourseEntity:
        return CourseEntity(
            id=row["course_id"],
            title=row["title"],
            description=row["description"],
            enroll_date=parse_date(row["enroll_date"]),
            trainer=TrainerEntity(id=row["trainer_id"], full_name=row["trainer_name"]),
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )
