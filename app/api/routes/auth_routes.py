"""
Authentication Routes

POST /auth/register - Register new user
POST /auth/login - Login and get JWT token
GET /auth/me - Get current user info
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from pymongo.errors import DuplicateKeyError

from app.api.deps import get_user_repository
from app.core.auth import (
    hash_password, verify_password, create_access_token, get_app_settings, get_current_user
)
from app.core.config import Settings
from app.core.exceptions import AuthError, ConflictError, NotFoundError, ValidationFailed
from app.schemas.schemas import (
    RegisterRequest, LoginRequest, TokenResponse, UserResponse, MessageResponse
)
from app.schemas.validation import validate
from app.services.repository import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=MessageResponse, status_code=201)
def register(payload: Any = Body(...), users: UserRepository = Depends(get_user_repository)):
    """
    Register a new user account.

    After registration, login to get an access token.
    """
    result = validate(RegisterRequest, payload)
    if not result.ok:
        raise ValidationFailed(result.details())

    username = result.value["username"]
    if users.get_by_username(username):
        raise ConflictError("Username already registered")

    try:
        users.insert(username, hash_password(result.value["password"]))
    except DuplicateKeyError as exc:
        raise ConflictError("Username already registered") from exc

    logger.info("Registered user %s", username)
    return MessageResponse(message="Registered successfully. Please login.")


@router.post("/login", response_model=TokenResponse)
def login(
    request: LoginRequest,
    users: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_app_settings)
):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    user = users.get_by_username(request.username)

    if not user or not verify_password(request.password, user["password_hash"]):
        raise AuthError("Invalid username or password")

    token = create_access_token(data={"sub": user["username"]}, settings=settings)

    return TokenResponse(access_token=token, expires_in=settings.jwt_expire_minutes * 60)


@router.get("/me", response_model=UserResponse)
def get_me(
    user: dict = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository)
):
    """Get current authenticated user's info."""
    doc = users.get_by_username(user["username"])
    if not doc:
        raise NotFoundError("User not found")

    return UserResponse(username=doc["username"], createdAt=doc.get("createdAt"))
