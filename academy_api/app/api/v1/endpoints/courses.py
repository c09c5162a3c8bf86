"""
Course endpoints for API v1.

These routes provide CRUD operations for courses.  All business
validation (required fields, enrollment date, trainer assignment) is
performed by ``CourseService``; failures come back as 400 responses
with the rule's message in ``detail``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from academy_api.app.api.deps import get_course_mapper, get_course_service
from academy_api.app.core.exceptions import ServiceError
from academy_api.app.mappers.course_mapper import CourseMapper
from academy_api.app.models.trainer import ID_MAX
from academy_api.app.schemas.course import CourseRecord
from academy_api.app.services.course_service import CourseService


router = APIRouter()


@router.post(
    "/",
    response_model=CourseRecord,
    summary="Create a new course",
    responses={400: {"description": "Invalid input"}},
)
def create_course(
    course_in: CourseRecord,
    service: CourseService = Depends(get_course_service),
    mapper: CourseMapper = Depends(get_course_mapper),
) -> CourseRecord:
    """Add a new course to the system."""
    entity = mapper.to_entity(course_in)
    entity.id = None
    try:
        return service.create_course(entity)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.get("/", response_model=List[CourseRecord], summary="Get all courses")
def list_courses(
    title: Optional[str] = Query(None, description="Only courses whose title contains this text"),
    description: Optional[str] = Query(
        None, description="Only courses whose description contains this text"
    ),
    service: CourseService = Depends(get_course_service),
) -> List[CourseRecord]:
    """Retrieve all courses, optionally filtered by title or description."""
    if title or description:
        return service.search_courses(title=title, description=description)
    return service.get_all_courses()


@router.get(
    "/{course_id}",
    response_model=CourseRecord,
    summary="Get a course by ID",
    responses={404: {"description": "Course not found"}},
)
def get_course(
    course_id: int = Path(..., ge=1, le=ID_MAX),
    service: CourseService = Depends(get_course_service),
) -> CourseRecord:
    try:
        return service.get_course_by_id(course_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.put(
    "/{course_id}",
    response_model=CourseRecord,
    summary="Update a course",
    responses={400: {"description": "Invalid input"}, 404: {"description": "Course not found"}},
)
def update_course(
    course_in: CourseRecord,
    course_id: int = Path(..., ge=1, le=ID_MAX),
    service: CourseService = Depends(get_course_service),
    mapper: CourseMapper = Depends(get_course_mapper),
) -> CourseRecord:
    """Replace title, description, enrollment date and trainer of a course."""
    try:
        return service.update_course(course_id, mapper.to_entity(course_in))
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.delete(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a course",
    responses={404: {"description": "Course not found"}},
)
def delete_course(
    course_id: int = Path(..., ge=1, le=ID_MAX),
    service: CourseService = Depends(get_course_service),
) -> Response:
    if not service.delete_course(course_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
