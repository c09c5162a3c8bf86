from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from .trainer import TrainerEntity


TITLE_MAX_LENGTH = 50


@dataclass
class CourseEntity:
    """A course row together with a reference to the trainer who owns it."""

    id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    enroll_date: Optional[date] = None
    trainer: Optional[TrainerEntity] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def trainer_id(self) -> Optional[int]:
        return self.trainer.id if self.trainer is not None else None
