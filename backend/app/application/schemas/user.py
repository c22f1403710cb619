"""Pydantic DTOs for user profiles. None of them carries the password hash."""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from app.domain.entities import Role

# bcrypt ignores everything past 72 bytes of input
MAX_PASSWORD_BYTES = 72


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


NewPassword = Annotated[
    str,
    Field(min_length=8, max_length=MAX_PASSWORD_BYTES),
    AfterValidator(_check_password_bytes),
]


class UserIdentityResponse(BaseModel):
    """Public identity attached to ratings and store owners."""

    id: int
    name: str
    email: str

    model_config = {"from_attributes": True}


class UserResponse(BaseModel):
    """User profile in API responses."""

    id: int
    name: str
    email: str
    address: str | None
    role: Role
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PasswordUpdateRequest(BaseModel):
    """Change the caller's password; the current one must be supplied."""

    current_password: str = Field(..., min_length=1)
    new_password: NewPassword


class MessageResponse(BaseModel):
    message: str
