"""
Persisted entities.

Entities mirror rows in storage and carry object references to
related entities (a course references its trainer).  They are plain
dataclasses; the repositories build them from SQLite rows and the
mappers convert them to and from the transport schemas.
"""

from .course import CourseEntity
from .trainer import TrainerEntity

__all__ = ["CourseEntity", "TrainerEntity"]
