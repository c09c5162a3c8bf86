import sqlite3
from typing import List, Optional

from ..core.db import get_connection
from ..models.trainer import TrainerEntity
from ._convert import parse_timestamp

_SELECT = "SELECT trainer_id, full_name, created_at, updated_at FROM trainers"


class TrainerRepository:
    """Stores and loads ``TrainerEntity`` rows from the ``trainers`` table."""

    def save(self, trainer: TrainerEntity) -> TrainerEntity:
        """Insert or update a trainer and return the stored row.

        A trainer without ``id`` is inserted and receives the id
        generated by SQLite.  A trainer with an ``id`` overwrites the
        existing row and bumps ``updated_at``; if no such row exists it
        is inserted under that id.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            if trainer.id is None:
                cursor.execute(
                    "INSERT INTO trainers (full_name) VALUES (?)",
                    (trainer.full_name,),
                )
                trainer_id = cursor.lastrowid
            else:
                cursor.execute(
                    """
                    UPDATE trainers
                    SET full_name = ?, updated_at = CURRENT_TIMESTAMP
                    WHERE trainer_id = ?
                    """,
                    (trainer.full_name, trainer.id),
                )
                if cursor.rowcount == 0:
                    cursor.execute(
                        "INSERT INTO trainers (trainer_id, full_name) VALUES (?, ?)",
                        (trainer.id, trainer.full_name),
                    )
                trainer_id = trainer.id
            conn.commit()
            row = cursor.execute(
                f"{_SELECT} WHERE trainer_id = ?", (trainer_id,)
            ).fetchone()
            return self._row_to_entity(row)
        finally:
            conn.close()

    def find_by_id(self, trainer_id: int) -> Optional[TrainerEntity]:
        conn = get_connection()
        try:
            row = conn.execute(
                f"{_SELECT} WHERE trainer_id = ?", (trainer_id,)
            ).fetchone()
            return self._row_to_entity(row) if row else None
        finally:
            conn.close()

    def find_all(self) -> List[TrainerEntity]:
        conn = get_connection()
        try:
            rows = conn.execute(f"{_SELECT} ORDER BY trainer_id").fetchall()
            return [self._row_to_entity(row) for row in rows]
        finally:
            conn.close()

    def exists_by_id(self, trainer_id: int) -> bool:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT 1 FROM trainers WHERE trainer_id = ?", (trainer_id,)
            ).fetchone()
            return row is not None
        finally:
            conn.close()

    def delete_by_id(self, trainer_id: int) -> None:
        """Delete a trainer.

        Raises ``sqlite3.IntegrityError`` when courses still reference
        the trainer.
        """
        conn = get_connection()
        try:
            conn.execute("DELETE FROM trainers WHERE trainer_id = ?", (trainer_id,))
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_entity(row: sqlite3.Row) -> TrainerEntity:
        return TrainerEntity(
            id=row["trainer_id"],
            full_name=row["full_name"],
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )
