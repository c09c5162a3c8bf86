"""
Trainer endpoints for API v1.

These routes provide CRUD operations for trainers plus a read-only
listing of the courses a trainer owns.  Request bodies are
``TrainerRecord`` payloads; they are mapped to entities before being
handed to ``TrainerService``.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from academy_api.app.api.deps import get_course_service, get_trainer_mapper, get_trainer_service
from academy_api.app.core.exceptions import ServiceError
from academy_api.app.mappers.trainer_mapper import TrainerMapper
from academy_api.app.models.trainer import ID_MAX
from academy_api.app.schemas.course import CourseRecord
from academy_api.app.schemas.trainer import TrainerRecord
from academy_api.app.services.course_service import CourseService
from academy_api.app.services.trainer_service import TrainerService


router = APIRouter()


@router.get("/", response_model=List[TrainerRecord], summary="Get all trainers")
def list_trainers(
    service: TrainerService = Depends(get_trainer_service),
) -> List[TrainerRecord]:
    """Retrieve a list of all trainers."""
    return service.get_all_trainers()


@router.get(
    "/{trainer_id}",
    response_model=TrainerRecord,
    summary="Get trainer by ID",
    responses={404: {"description": "Trainer not found"}},
)
def get_trainer(
    trainer_id: int = Path(..., ge=1, le=ID_MAX),
    service: TrainerService = Depends(get_trainer_service),
) -> TrainerRecord:
    """Retrieve a single trainer by their ID."""
    try:
        return service.get_trainer_by_id(trainer_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.post(
    "/",
    response_model=TrainerRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new trainer",
    responses={400: {"description": "Invalid input"}},
)
def create_trainer(
    trainer_in: TrainerRecord,
    service: TrainerService = Depends(get_trainer_service),
    mapper: TrainerMapper = Depends(get_trainer_mapper),
) -> TrainerRecord:
    """Create a new trainer.

    Any ``id`` in the payload is ignored; storage assigns a new one.
    """
    entity = mapper.to_entity(trainer_in)
    entity.id = None
    try:
        return service.create_trainer(entity)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.put(
    "/{trainer_id}",
    response_model=TrainerRecord,
    summary="Update a trainer",
    responses={400: {"description": "Invalid input"}, 404: {"description": "Trainer not found"}},
)
def update_trainer(
    trainer_in: TrainerRecord,
    trainer_id: int = Path(..., ge=1, le=ID_MAX),
    service: TrainerService = Depends(get_trainer_service),
    mapper: TrainerMapper = Depends(get_trainer_mapper),
) -> TrainerRecord:
    """Replace the full name of an existing trainer."""
    try:
        return service.update_trainer(trainer_id, mapper.to_entity(trainer_in))
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.delete(
    "/{trainer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a trainer",
    responses={404: {"description": "Trainer not found"}},
)
def delete_trainer(
    trainer_id: int = Path(..., ge=1, le=ID_MAX),
    service: TrainerService = Depends(get_trainer_service),
) -> Response:
    """Delete a trainer by ID.

    Trainers that still own courses cannot be deleted; the request
    fails with 409 Conflict.
    """
    if not service.delete_trainer_by_id(trainer_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Trainer not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{trainer_id}/courses",
    response_model=List[CourseRecord],
    summary="Get the courses of a trainer",
    responses={404: {"description": "Trainer not found"}},
)
def list_trainer_courses(
    trainer_id: int = Path(..., ge=1, le=ID_MAX),
    after: Optional[date] = Query(None, description="Only courses enrolling strictly after this date"),
    service: CourseService = Depends(get_course_service),
) -> List[CourseRecord]:
    """List the courses assigned to the trainer, optionally only upcoming ones."""
    try:
        if after is not None:
            return service.get_upcoming_courses_for_trainer(trainer_id, after)
        return service.get_courses_for_trainer(trainer_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
