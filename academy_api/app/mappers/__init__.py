"""
Conversion between persisted entities and transport records.

Mappers are plain objects constructed once by the dependency
providers in ``api.deps`` and passed to the services that need them.
"""

from .course_mapper import CourseMapper
from .trainer_mapper import TrainerMapper

__all__ = ["CourseMapper", "TrainerMapper"]
