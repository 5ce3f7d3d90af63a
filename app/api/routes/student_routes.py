"""
Student Routes

POST /student - Create student
GET /student?page&limit - List students (paginated)
GET /student/{student_id} - Get student by Student_ID
PUT /student/{student_id} - Update student (partial)
DELETE /student/{student_id} - Delete student

All routes require a bearer token.
"""

from functools import partial
from typing import Any

from fastapi import APIRouter, Body, Depends, Path, Query, Response, status

from app.api.deps import get_student_repository
from app.core.auth import get_current_user
from app.schemas.schemas import (
    CREATE_ERRORS, SAFE_INT_MAX, UPDATE_ERRORS, PageResponse, StudentCreate, StudentUpdate
)
from app.schemas.validation import validate
from app.services.repository import StudentRepository
from app.services.resource_service import (
    create_resource, delete_resource, get_resource, list_resources, update_resource
)

router = APIRouter(prefix="/student", tags=["Students"], dependencies=[Depends(get_current_user)])

validate_student = partial(validate, StudentCreate)
validate_student_update = partial(validate, StudentUpdate, partial=True)


@router.post("", status_code=201, responses=CREATE_ERRORS)
def create_student(
    payload: Any = Body(...),
    repo: StudentRepository = Depends(get_student_repository)
):
    """
    Create a student.

    400 if validation fails (all field errors listed), 409 if the Student_ID
    or Email is already taken.
    """
    return create_resource(repo, validate_student, payload)


@router.get("", responses={200: {"model": PageResponse}})
def list_students(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    repo: StudentRepository = Depends(get_student_repository)
):
    """List students in creation order."""
    return list_resources(repo, page=page, limit=limit)


@router.get("/{student_id}")
def get_student(
    student_id: int = Path(..., ge=-SAFE_INT_MAX, le=SAFE_INT_MAX),
    repo: StudentRepository = Depends(get_student_repository)
):
    return get_resource(repo, student_id)


@router.put("/{student_id}", responses=UPDATE_ERRORS)
def update_student(
    student_id: int = Path(..., ge=-SAFE_INT_MAX, le=SAFE_INT_MAX),
    payload: Any = Body(...),
    repo: StudentRepository = Depends(get_student_repository)
):
    """Update a student. Only provided fields are updated."""
    return update_resource(repo, validate_student_update, student_id, payload)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(
    student_id: int = Path(..., ge=-SAFE_INT_MAX, le=SAFE_INT_MAX),
    repo: StudentRepository = Depends(get_student_repository)
):
    delete_resource(repo, student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
