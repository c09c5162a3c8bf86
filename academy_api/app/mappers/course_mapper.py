from typing import Optional

from ..models.course import CourseEntity
from ..models.trainer import TrainerEntity
from ..schemas.course import CourseRecord


class CourseMapper:
    """Maps ``CourseEntity`` to ``CourseRecord`` and back.

    The record is flat: the trainer reference is reduced to
    ``trainer_id`` on the way out and expanded into a placeholder
    ``TrainerEntity`` on the way in.
    """

    def to_record(self, course: Optional[CourseEntity]) -> Optional[CourseRecord]:
        if course is None:
            return None
        return CourseRecord(
            id=course.id,
            title=course.title,
            description=course.description,
            enroll_date=course.enroll_date,
            trainer_id=course.trainer_id,
        )

    def to_entity(self, record: Optional[CourseRecord]) -> Optional[CourseEntity]:
        """Build an entity from a record without touching storage.

        ``created_at`` and ``updated_at`` are never populated here.
        """
        if record is None:
            return None
        return CourseEntity(
            id=record.id,
            title=record.title,
            description=record.description,
            enroll_date=record.enroll_date,
            trainer=self.trainer_from_id(record.trainer_id),
        )

    @staticmethod
    def trainer_from_id(trainer_id: Optional[int]) -> Optional[TrainerEntity]:
        """Wrap a bare trainer id into a reference carrying only that id."""
        if trainer_id is None:
            return None
        return TrainerEntity(id=trainer_id)
