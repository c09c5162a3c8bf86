"""
Business logic for courses.

``CourseService`` validates incoming course entities before any write
and applies in-place update semantics: an update copies the new title,
description, enrollment date and trainer onto the stored entity, so
the id and ``created_at`` of the row are kept.

Validation stops at the first failing rule and reports it as a
``BadRequestError``:

1. the entity is present;
2. the title is present and not blank;
3. the description is present and not blank;
4. the enrollment date is present;
5. the enrollment date is today or later;
6. a trainer is assigned.

After these rules the service checks that the referenced trainer
exists, so an unknown trainer id is reported as a bad request rather
than surfacing as a foreign key violation from SQLite.
"""

import logging
from datetime import date
from typing import Callable, List, NoReturn, Optional

from ..core.exceptions import BadRequestError, NotFoundError
from ..mappers.course_mapper import CourseMapper
from ..models.course import CourseEntity
from ..repositories.course_repository import CourseRepository
from ..repositories.trainer_repository import TrainerRepository
from ..schemas.course import CourseRecord


logger = logging.getLogger(__name__)


class CourseService:
    """CRUD and search operations for courses."""

    def __init__(
        self,
        course_repository: CourseRepository,
        course_mapper: CourseMapper,
        trainer_repository: TrainerRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        if course_repository is None:
            raise ValueError("course_repository cannot be None")
        if course_mapper is None:
            raise ValueError("course_mapper cannot be None")
        if trainer_repository is None:
            raise ValueError("trainer_repository cannot be None")
        self.course_repository = course_repository
        self.course_mapper = course_mapper
        self.trainer_repository = trainer_repository
        self.today = today

    def create_course(self, course: Optional[CourseEntity]) -> CourseRecord:
        self.validate_course(course)
        self._check_trainer_exists(course)
        saved = self.course_repository.save(course)
        logger.info("Created course %s for trainer %s", saved.id, saved.trainer_id)
        return self.course_mapper.to_record(saved)

    def get_all_courses(self) -> List[CourseRecord]:
        return self._to_records(self.course_repository.find_all())

    def get_course_by_id(self, course_id: int) -> CourseRecord:
        entity = self.course_repository.find_by_id(course_id)
        if entity is None:
            raise NotFoundError(f"Course not found with ID: {course_id}")
        return self.course_mapper.to_record(entity)

    def update_course(self, course_id: Optional[int], course: Optional[CourseEntity]) -> CourseRecord:
        if course_id is None or course is None:
            raise BadRequestError("Course ID and entity cannot be null")

        existing = self.course_repository.find_by_id(course_id)
        if existing is None:
            raise NotFoundError(f"Course not found with ID: {course_id}")

        self.validate_course(course)
        self._check_trainer_exists(course)

        existing.title = course.title
        existing.description = course.description
        existing.enroll_date = course.enroll_date
        existing.trainer = course.trainer

        saved = self.course_repository.save(existing)
        logger.info("Updated course %s", course_id)
        return self.course_mapper.to_record(saved)

    def delete_course(self, course_id: int) -> bool:
        """Delete a course, returning ``False`` if it did not exist."""
        if not self.course_repository.exists_by_id(course_id):
            return False
        self.course_repository.delete_by_id(course_id)
        logger.info("Deleted course %s", course_id)
        return True

    def get_courses_for_trainer(self, trainer_id: int) -> List[CourseRecord]:
        self._require_trainer(trainer_id)
        return self._to_records(self.course_repository.find_by_trainer_id(trainer_id))

    def search_courses(
        self, title: Optional[str] = None, description: Optional[str] = None
    ) -> List[CourseRecord]:
        """Find courses whose title and/or description contain the given text."""
        if title:
            courses = self.course_repository.find_by_title_containing(title)
            if description:
                courses = [c for c in courses if description in (c.description or "")]
        elif description:
            courses = self.course_repository.find_by_description_containing(description)
        else:
            courses = self.course_repository.find_all()
        return self._to_records(courses)

    def get_upcoming_courses_for_trainer(self, trainer_id: int, after: date) -> List[CourseRecord]:
        """Courses of the trainer whose enrollment date is strictly after ``after``."""
        self._require_trainer(trainer_id)
        return self._to_records(
            self.course_repository.find_by_trainer_id_and_enroll_date_after(trainer_id, after)
        )

    def count_courses_for_trainer(self, trainer_id: int) -> int:
        return self.course_repository.count_by_trainer_id(trainer_id)

    def title_exists(self, title: str) -> bool:
        return self.course_repository.exists_by_title_ignore_case(title)

    def validate_course(self, course: Optional[CourseEntity]) -> None:
        if course is None:
            self._reject("Course cannot be null")
        if course.title is None or not course.title.strip():
            self._reject("Course title cannot be empty")
        if course.description is None or not course.description.strip():
            self._reject("Course description cannot be empty")
        if course.enroll_date is None:
            self._reject("Enroll date cannot be null")
        if course.enroll_date < self.today():
            self._reject("Enroll date cannot be in the past")
        if course.trainer is None:
            self._reject("Course must have a trainer assigned")

    def _require_trainer(self, trainer_id: int) -> None:
        if not self.trainer_repository.exists_by_id(trainer_id):
            raise NotFoundError(f"Trainer not found with ID: {trainer_id}")

    def _check_trainer_exists(self, course: CourseEntity) -> None:
        trainer_id = course.trainer_id
        if trainer_id is None or not self.trainer_repository.exists_by_id(trainer_id):
            self._reject(f"Trainer not found with ID: {trainer_id}")

    def _to_records(self, courses: List[CourseEntity]) -> List[CourseRecord]:
        return [self.course_mapper.to_record(c) for c in courses]

    @staticmethod
    def _reject(message: str) -> NoReturn:
        logger.warning("Rejected course: %s", message)
        raise BadRequestError(message)
