"""
Persistence gateways backed by SQLite.

Repositories own all SQL.  Every call opens its own connection via
``core.db.get_connection`` and closes it before returning, so a
repository instance holds no state and may be shared freely.  All
queries use parameterized statements.
"""

from .course_repository import CourseRepository
from .trainer_repository import TrainerRepository

__all__ = ["CourseRepository", "TrainerRepository"]
