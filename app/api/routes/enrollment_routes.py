"""
Enrollment Routes

POST /enrollment - Create enrollment
GET /enrollment?page&limit - List enrollments (paginated)
GET /enrollment/{enrollment_id} - Get enrollment by Enrollment_ID
PUT /enrollment/{enrollment_id} - Update enrollment (partial)
DELETE /enrollment/{enrollment_id} - Delete enrollment

All routes require a bearer token. A student can be enrolled in a given
course only once.
"""

from functools import partial
from typing import Any

from fastapi import APIRouter, Body, Depends, Path, Query, Response, status

from app.api.deps import get_enrollment_repository
from app.core.auth import get_current_user
from app.schemas.schemas import (
    CREATE_ERRORS, SAFE_INT_MAX, UPDATE_ERRORS, EnrollmentCreate, EnrollmentUpdate, PageResponse
)
from app.schemas.validation import validate
from app.services.repository import EnrollmentRepository
from app.services.resource_service import (
    create_resource, delete_resource, get_resource, list_resources, update_resource
)

router = APIRouter(prefix="/enrollment", tags=["Enrollments"], dependencies=[Depends(get_current_user)])

validate_enrollment = partial(validate, EnrollmentCreate)
validate_enrollment_update = partial(validate, EnrollmentUpdate, partial=True)


@router.post("", status_code=201, responses=CREATE_ERRORS)
def create_enrollment(
    payload: Any = Body(...),
    repo: EnrollmentRepository = Depends(get_enrollment_repository)
):
    """Create an enrollment. 409 if the Enrollment_ID or (Student_ID, Course_ID) pair exists."""
    return create_resource(repo, validate_enrollment, payload)


@router.get("", responses={200: {"model": PageResponse}})
def list_enrollments(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    repo: EnrollmentRepository = Depends(get_enrollment_repository)
):
    return list_resources(repo, page=page, limit=limit)


@router.get("/{enrollment_id}")
def get_enrollment(
    enrollment_id: int = Path(..., ge=-SAFE_INT_MAX, le=SAFE_INT_MAX),
    repo: EnrollmentRepository = Depends(get_enrollment_repository)
):
    return get_resource(repo, enrollment_id)


@router.put("/{enrollment_id}", responses=UPDATE_ERRORS)
def update_enrollment(
    enrollment_id: int = Path(..., ge=-SAFE_INT_MAX, le=SAFE_INT_MAX),
    payload: Any = Body(...),
    repo: EnrollmentRepository = Depends(get_enrollment_repository)
):
    return update_resource(repo, validate_enrollment_update, enrollment_id, payload)


@router.delete("/{enrollment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_enrollment(
    enrollment_id: int = Path(..., ge=-SAFE_INT_MAX, le=SAFE_INT_MAX),
    repo: EnrollmentRepository = Depends(get_enrollment_repository)
):
    delete_resource(repo, enrollment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
