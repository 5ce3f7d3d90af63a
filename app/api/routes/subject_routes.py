"""
Subject Routes

POST /subject - Create subject
GET /subject?page&limit - List subjects (paginated)
GET /subject/{subject_id} - Get subject by Subject_ID
PUT /subject/{subject_id} - Update subject (partial)
DELETE /subject/{subject_id} - Delete subject
"""

from functools import partial
from typing import Any

from fastapi import APIRouter, Body, Depends, Path, Query, Response, status

from app.api.deps import get_subject_repository
from app.core.auth import get_current_user
from app.schemas.schemas import (
    CREATE_ERRORS, SAFE_INT_MAX, UPDATE_ERRORS, PageResponse, SubjectCreate, SubjectUpdate
)
from app.schemas.validation import validate
from app.services.repository import SubjectRepository
from app.services.resource_service import (
    create_resource, delete_resource, get_resource, list_resources, update_resource
)

router = APIRouter(prefix="/subject", tags=["Subjects"], dependencies=[Depends(get_current_user)])

validate_subject = partial(validate, SubjectCreate)
validate_subject_update = partial(validate, SubjectUpdate, partial=True)


@router.post("", status_code=201, responses=CREATE_ERRORS)
def create_subject(
    payload: Any = Body(...),
    repo: SubjectRepository = Depends(get_subject_repository)
):
    return create_resource(repo, validate_subject, payload)


@router.get("", responses={200: {"model": PageResponse}})
def list_subjects(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    repo: SubjectRepository = Depends(get_subject_repository)
):
    return list_resources(repo, page=page, limit=limit)


@router.get("/{subject_id}")
def get_subject(
    subject_id: int = Path(..., ge=-SAFE_INT_MAX, le=SAFE_INT_MAX),
    repo: SubjectRepository = Depends(get_subject_repository)
):
    return get_resource(repo, subject_id)


@router.put("/{subject_id}", responses=UPDATE_ERRORS)
def update_subject(
    subject_id: int = Path(..., ge=-SAFE_INT_MAX, le=SAFE_INT_MAX),
    payload: Any = Body(...),
    repo: SubjectRepository = Depends(get_subject_repository)
):
    return update_resource(repo, validate_subject_update, subject_id, payload)


@router.delete("/{subject_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_subject(
    subject_id: int = Path(..., ge=-SAFE_INT_MAX, le=SAFE_INT_MAX),
    repo: SubjectRepository = Depends(get_subject_repository)
):
    delete_resource(repo, subject_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
