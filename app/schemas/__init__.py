"""Pydantic request/response schemas."""

from app.schemas.auth import Principal, Role
from app.schemas.user import (
    ErrorResponse,
    UserCreateBody,
    UserCreated,
    UserDeleteBody,
    UserId,
    UserRead,
    UserUpdateBody,
)

__all__ = [
    "ErrorResponse",
    "Principal",
    "Role",
    "UserCreateBody",
    "UserCreated",
    "UserDeleteBody",
    "UserId",
    "UserRead",
    "UserUpdateBody",
]
