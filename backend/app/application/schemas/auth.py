"""Pydantic DTOs for signup, login and session management."""

from pydantic import BaseModel, EmailStr, Field

from .user import NewPassword, UserResponse


class SignupRequest(BaseModel):
    """Self-service registration — always creates a USER-role account."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    address: str | None = Field(None, max_length=400)
    password: NewPassword


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RefreshRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1)


class LogoutRequest(BaseModel):
    refresh_token: str | None = None


class TokenPairResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class AuthResponse(TokenPairResponse):
    """Tokens plus the profile of the user they were issued to."""

    user: UserResponse
