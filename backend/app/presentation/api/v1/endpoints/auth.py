"""Authentication endpoints.

POST /auth/signup  — register a USER account, returns a session
POST /auth/login   — exchange credentials for access + refresh tokens
POST /auth/refresh — rotate a refresh token
POST /auth/logout  — revoke a refresh token
"""

from fastapi import APIRouter, Depends, status

from app.application.schemas import (
    AuthResponse,
    LoginRequest,
    LogoutRequest,
    MessageResponse,
    RefreshRequest,
    SignupRequest,
    TokenPairResponse,
    UserResponse,
)
from app.application.services import AuthResult, AuthService
from app.domain.exceptions import DomainError
from app.infrastructure.dependencies import get_auth_service
from app.presentation.api.v1.errors import to_http_exception

router = APIRouter(prefix="/auth", tags=["Auth"])


def _auth_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        access_token=result.tokens.access_token,
        refresh_token=result.tokens.refresh_token,
        user=UserResponse.model_validate(result.user),
    )


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    data: SignupRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Register a new user account."""
    try:
        result = await service.signup(data)
    except DomainError as e:
        raise to_http_exception(e)
    return _auth_response(result)


@router.post("/login", response_model=AuthResponse)
async def login(
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    try:
        result = await service.login(data.email, data.password)
    except DomainError as e:
        raise to_http_exception(e)
    return _auth_response(result)


@router.post("/refresh", response_model=TokenPairResponse)
async def refresh(
    data: RefreshRequest,
    service: AuthService = Depends(get_auth_service),
) -> TokenPairResponse:
    """Consume a refresh token and return a new token pair."""
    try:
        tokens = await service.rotate_session(data.refresh_token)
    except DomainError as e:
        raise to_http_exception(e)
    return TokenPairResponse(access_token=tokens.access_token, refresh_token=tokens.refresh_token)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    data: LogoutRequest,
    service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    await service.revoke_session(data.refresh_token)
    return MessageResponse(message="Logged out")
