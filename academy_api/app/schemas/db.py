"""Schemas for the database diagnostics endpoints."""

from enum import Enum

from pydantic import BaseModel, Field


class SampleTable(str, Enum):
    """Tables and views that may be sampled through ``/db/sample``."""

    trainers = "trainers"
    courses = "courses"
    course_details = "course_details"


class PingResult(BaseModel):
    status: str = Field(..., examples=["OK: 1"])
