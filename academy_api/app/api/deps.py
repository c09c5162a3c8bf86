"""
FastAPI dependency providers.

The providers build services from repositories and mappers so that
endpoints only declare ``Depends(get_course_service)``.  Tests swap
them out through ``app.dependency_overrides``.
"""

from fastapi import Depends

from ..mappers.course_mapper import CourseMapper
from ..mappers.trainer_mapper import TrainerMapper
from ..repositories.course_repository import CourseRepository
from ..repositories.trainer_repository import TrainerRepository
from ..services.course_service import CourseService
from ..services.db_service import DbService
from ..services.trainer_service import TrainerService


def get_trainer_repository() -> TrainerRepository:
    return TrainerRepository()


def get_course_repository() -> CourseRepository:
    return CourseRepository()


def get_trainer_mapper() -> TrainerMapper:
    return TrainerMapper()


def get_course_mapper() -> CourseMapper:
    return CourseMapper()


def get_trainer_service(
    repository: TrainerRepository = Depends(get_trainer_repository),
    mapper: TrainerMapper = Depends(get_trainer_mapper),
) -> TrainerService:
    return TrainerService(repository, mapper)


def get_course_service(
    course_repository: CourseRepository = Depends(get_course_repository),
    mapper: CourseMapper = Depends(get_course_mapper),
    trainer_repository: TrainerRepository = Depends(get_trainer_repository),
) -> CourseService:
    return CourseService(course_repository, mapper, trainer_repository)


def get_db_service() -> DbService:
    return DbService()
