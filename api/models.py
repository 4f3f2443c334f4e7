"""
API request and response models for the net-worth edge service.

These Pydantic v2 models define the HTTP transport contract. The user record
itself is owned by the backend API; UserResponse is the projection of it that
may leave that service -- account state and profile fields, never password
material.
"""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class RoleEnum(str, Enum):
    SUPER_ADMIN = "SUPER_ADMIN"
    USER = "USER"


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class ErrorDetail(BaseModel):
    """Machine-readable error payload."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: Optional[str] = None


class ErrorResponse(BaseModel):
    """Top-level error envelope returned on 4xx/5xx responses."""

    model_config = ConfigDict(frozen=True)

    error: ErrorDetail


class HealthResponse(BaseModel):
    """Response for GET /api/v1/health."""

    model_config = ConfigDict(frozen=True)

    status: str = "ok"
    version: str


class UserResponse(BaseModel):
    """Public projection of a user account.

    Accepts both snake_case and the backend's camelCase field names, so the
    same model can wrap an ORM row, a dataclass, or a JSON payload from the
    backend. Unknown fields (password hashes, reset tokens) are dropped.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    email: str
    first_name: str = Field(alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    role: RoleEnum = RoleEnum.USER
    currency: str = "AED"
    is_active: bool = Field(default=True, alias="isActive")
    is_disabled: bool = Field(default=False, alias="isDisabled")
    failed_login_attempts: int = Field(default=0, alias="failedLoginAttempts")
    force_change_password: bool = Field(default=False, alias="forceChangePassword")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @classmethod
    def from_user(cls, user: Any) -> "UserResponse":
        """Build a UserResponse from a mapping or any object with user attributes."""
        if isinstance(user, Mapping):
            return cls.model_validate(dict(user))
        data: dict[str, Any] = {}
        for name, info in cls.model_fields.items():
            for key in (name, info.alias):
                if key and hasattr(user, key):
                    data[name] = getattr(user, key)
                    break
        return cls.model_validate(data)
