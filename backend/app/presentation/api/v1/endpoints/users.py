"""The signed-in user's own profile."""

from fastapi import APIRouter, Depends

from app.application.schemas import MessageResponse, PasswordUpdateRequest, UserResponse
from app.application.services import UserService
from app.domain.entities import Principal
from app.domain.exceptions import DomainError
from app.infrastructure.dependencies import get_current_principal, get_user_service
from app.presentation.api.v1.errors import to_http_exception

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/me", response_model=UserResponse)
async def get_me(
    principal: Principal = Depends(get_current_principal),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        user = await service.get_profile(principal.user_id)
    except DomainError as e:
        raise to_http_exception(e)
    return UserResponse.model_validate(user)


@router.patch("/me/password", response_model=MessageResponse)
async def update_my_password(
    data: PasswordUpdateRequest,
    principal: Principal = Depends(get_current_principal),
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Change the caller's password after checking the current one."""
    try:
        await service.update_password(
            principal.user_id, data.current_password, data.new_password
        )
    except DomainError as e:
        raise to_http_exception(e)
    return MessageResponse(message="Password updated")
