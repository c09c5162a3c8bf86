"""
Pydantic model for trainer data.

``TrainerRecord`` is used for request bodies and responses alike.
The ``id`` is ignored on create and overwritten by the path
parameter on update.  The record never lists the trainer's courses;
clients fetch them from ``/trainers/{id}/courses``.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..models.trainer import FULL_NAME_MAX_LENGTH, ID_MAX


class TrainerRecord(BaseModel):
    """Record for Trainer."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        title="Trainer",
    )

    id: Optional[int] = Field(None, ge=1, le=ID_MAX, description="Trainer ID", examples=[1])
    full_name: str = Field(
        ...,
        min_length=1,
        max_length=FULL_NAME_MAX_LENGTH,
        description="Full name of the trainer",
        examples=["John Doe"],
    )
