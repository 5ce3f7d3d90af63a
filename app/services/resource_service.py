"""
Resource Service - the CRUD contract shared by students, enrollments and subjects.

Each operation is a plain function taking its collaborators explicitly:
    repository - a MongoRepository subclass instance
    validator  - callable(raw) -> Valid | Invalid

Failures are raised as domain exceptions (app.core.exceptions) and rendered
by the app's exception handlers.
"""

import logging
import math
from typing import Any, Callable, Optional

from pymongo.errors import DuplicateKeyError

from app.core.exceptions import ConflictError, NotFoundError, ValidationFailed
from app.schemas.validation import ValidationResult
from app.services.repository import MongoRepository

logger = logging.getLogger(__name__)

Validator = Callable[[Any], ValidationResult]

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def _validated(validator: Validator, raw: Any) -> dict:
    result = validator(raw)
    if not result.ok:
        raise ValidationFailed(result.details())
    return result.value


def _check_conflicts(
    repository: MongoRepository,
    fields: dict,
    current: Optional[dict] = None
) -> None:
    """
    Pre-check every unique key touched by `fields`.

    On update, `current` is the stored document: compound keys are completed
    from it and the document itself is excluded from the search.
    """
    exclude = current["_id"] if current else None
    merged = {**(current or {}), **fields}

    for keys, message in repository.unique_keys:
        if not any(key in fields for key in keys):
            continue
        query = {key: merged.get(key) for key in keys}
        if repository.exists(query, exclude=exclude):
            raise ConflictError(message)


def _duplicate_key_conflict(repository: MongoRepository, exc: DuplicateKeyError) -> ConflictError:
    # Lost the race between pre-check and write; the unique index caught it
    key_pattern = (exc.details or {}).get("keyPattern")
    logger.debug("Duplicate key on %s: %s", repository.entity_name, key_pattern)
    return ConflictError(repository.conflict_message(key_pattern))


def create_resource(repository: MongoRepository, validator: Validator, raw: Any) -> dict:
    """
    Validate, check uniqueness, insert.

    Returns:
        The stored document including createdAt/updatedAt
    """
    fields = _validated(validator, raw)
    _check_conflicts(repository, fields)

    try:
        return repository.insert(fields)
    except DuplicateKeyError as exc:
        raise _duplicate_key_conflict(repository, exc) from exc


def list_resources(
    repository: MongoRepository,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT
) -> dict:
    """
    One page in insertion order plus pagination metadata.

    A page past the end is not an error: it returns an empty data list.
    """
    errors = []
    if page < 1:
        errors.append({"field": "page", "message": "page must be at least 1"})
    if not 1 <= limit <= MAX_LIMIT:
        errors.append({"field": "limit", "message": f"limit must be between 1 and {MAX_LIMIT}"})
    if errors:
        raise ValidationFailed(errors)

    total = repository.count()
    data = repository.find_page(skip=(page - 1) * limit, limit=limit)

    return {
        "data": data,
        "pagination": {
            "total": total,
            "pages": math.ceil(total / limit),
            "page": page,
            "limit": limit
        }
    }


def get_resource(repository: MongoRepository, entity_id: int) -> dict:
    doc = repository.find_by_id(entity_id)
    if doc is None:
        raise NotFoundError(f"{repository.entity_name} not found")
    return doc


def update_resource(
    repository: MongoRepository,
    validator: Validator,
    entity_id: int,
    raw: Any
) -> dict:
    """
    Partial update. Only supplied fields change; the rest keep their values.
    """
    current = get_resource(repository, entity_id)
    fields = _validated(validator, raw)
    if not fields:
        raise ValidationFailed([], message="No fields to update")

    _check_conflicts(repository, fields, current=current)

    try:
        doc = repository.update(entity_id, fields)
    except DuplicateKeyError as exc:
        raise _duplicate_key_conflict(repository, exc) from exc

    # Deleted between the lookup and the write
    if doc is None:
        raise NotFoundError(f"{repository.entity_name} not found")
    return doc


def delete_resource(repository: MongoRepository, entity_id: int) -> None:
    if not repository.delete(entity_id):
        raise NotFoundError(f"{repository.entity_name} not found")
