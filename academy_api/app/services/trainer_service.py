"""
Business logic for trainers.

Trainers have no cross-entity rules: the service only checks that an
entity was supplied and that the target id exists before handing the
entity to the repository.
"""

import logging
from typing import List, Optional

from ..core.exceptions import BadRequestError, NotFoundError
from ..mappers.trainer_mapper import TrainerMapper
from ..models.trainer import TrainerEntity
from ..repositories.trainer_repository import TrainerRepository
from ..schemas.trainer import TrainerRecord


logger = logging.getLogger(__name__)


class TrainerService:
    """CRUD operations for trainers."""

    def __init__(self, trainer_repository: TrainerRepository, trainer_mapper: TrainerMapper) -> None:
        if trainer_repository is None:
            raise ValueError("trainer_repository cannot be None")
        if trainer_mapper is None:
            raise ValueError("trainer_mapper cannot be None")
        self.trainer_repository = trainer_repository
        self.trainer_mapper = trainer_mapper

    def get_all_trainers(self) -> List[TrainerRecord]:
        return [self.trainer_mapper.to_record(t) for t in self.trainer_repository.find_all()]

    def get_trainer_by_id(self, trainer_id: int) -> TrainerRecord:
        entity = self.trainer_repository.find_by_id(trainer_id)
        if entity is None:
            raise NotFoundError(f"Trainer not found with ID: {trainer_id}")
        return self.trainer_mapper.to_record(entity)

    def create_trainer(self, trainer: Optional[TrainerEntity]) -> TrainerRecord:
        if trainer is None:
            raise BadRequestError("Trainer entity cannot be null")
        saved = self.trainer_repository.save(trainer)
        logger.info("Created trainer %s", saved.id)
        return self.trainer_mapper.to_record(saved)

    def update_trainer(self, trainer_id: Optional[int], trainer: Optional[TrainerEntity]) -> TrainerRecord:
        """Overwrite every mutable field of an existing trainer.

        The id in ``trainer`` is ignored and replaced by ``trainer_id``.
        """
        if trainer_id is None or trainer is None:
            raise BadRequestError("Trainer ID and entity cannot be null")
        if not self.trainer_repository.exists_by_id(trainer_id):
            raise NotFoundError(f"Trainer not found with ID: {trainer_id}")
        trainer.id = trainer_id
        saved = self.trainer_repository.save(trainer)
        logger.info("Updated trainer %s", trainer_id)
        return self.trainer_mapper.to_record(saved)

    def delete_trainer_by_id(self, trainer_id: int) -> bool:
        """Delete a trainer, returning ``False`` if it did not exist."""
        if not self.trainer_repository.exists_by_id(trainer_id):
            return False
        self.trainer_repository.delete_by_id(trainer_id)
        logger.info("Deleted trainer %s", trainer_id)
        return True
