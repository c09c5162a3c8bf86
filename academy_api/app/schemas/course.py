"""
Pydantic model for course data.

Fields are optional at the schema level on purpose: required fields,
blank strings and past enrollment dates are rejected by
``CourseService.validate_course`` so that the same rules apply to
every caller, not only to HTTP clients.  The only structural limit
enforced here is the title length from the data model.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..models.course import TITLE_MAX_LENGTH
from ..models.trainer import ID_MAX


class CourseRecord(BaseModel):
    """Record for Course."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        title="Course",
    )

    id: Optional[int] = Field(None, ge=1, le=ID_MAX, description="Course ID", examples=[1])
    title: Optional[str] = Field(
        None,
        max_length=TITLE_MAX_LENGTH,
        description="Title of the course",
        examples=["Java Basics"],
    )
    description: Optional[str] = Field(
        None, description="Short description of the course", examples=["Intro to Java"]
    )
    enroll_date: Optional[date] = Field(
        None, description="Enrollment date", examples=["2025-01-15"]
    )
    trainer_id: Optional[int] = Field(
        None, ge=1, le=ID_MAX, description="Trainer ID for this course", examples=[2]
    )
