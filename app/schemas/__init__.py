"""
Schemas module - Request/Response schemas for API endpoints.

- schemas: pydantic models (entity field tables, auth, responses)
- validation: validate() -> Valid | Invalid
"""

from app.schemas.validation import FieldError, Invalid, Valid, ValidationResult, validate

__all__ = ["FieldError", "Invalid", "Valid", "ValidationResult", "validate"]
