from typing import Optional

from ..models.trainer import TrainerEntity
from ..schemas.trainer import TrainerRecord


class TrainerMapper:
    """Maps ``TrainerEntity`` to ``TrainerRecord`` and back."""

    def to_record(self, trainer: Optional[TrainerEntity]) -> Optional[TrainerRecord]:
        if trainer is None:
            return None
        return TrainerRecord(id=trainer.id, full_name=trainer.full_name)

    def to_entity(self, record: Optional[TrainerRecord]) -> Optional[TrainerEntity]:
        """Build an entity from a record.

        Timestamps are left unset so that storage defaults apply.
        """
        if record is None:
            return None
        return TrainerEntity(id=record.id, full_name=record.full_name)
