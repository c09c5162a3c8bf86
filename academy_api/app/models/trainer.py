from dataclasses import dataclass
from datetime import datetime
from typing import Optional


FULL_NAME_MAX_LENGTH = 100

# Ids are 32-bit signed integers.
ID_MAX = 2**31 - 1


@dataclass
class TrainerEntity:
    """A trainer row.

    Courses point at their trainer; the trainer itself does not keep a
    list of courses.  Use ``CourseRepository.find_by_trainer_id`` to
    load them when needed.
    """

    id: Optional[int] = None
    full_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
