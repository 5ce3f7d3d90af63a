"""
Domain exceptions.

Raised by services and the auth guard, rendered to JSON by the handlers
registered in app.main.
"""

from typing import List, Optional


class AppError(Exception):
    """Base class. Subclasses set the HTTP status they map to."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"message": self.message}


class ValidationFailed(AppError):
    status_code = 400
    default_message = "Validation error"

    def __init__(self, details: List[dict], message: Optional[str] = None):
        super().__init__(message)
        self.details = details

    def to_dict(self) -> dict:
        return {"message": self.message, "details": self.details}


class ConflictError(AppError):
    status_code = 409
    default_message = "Resource already exists"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Resource not found"


class AuthError(AppError):
    status_code = 401
    default_message = "Invalid or expired token"
