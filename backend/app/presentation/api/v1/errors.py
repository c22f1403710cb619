"""Translate domain exceptions into HTTP errors."""

from fastapi import HTTPException, status

from app.domain.exceptions import (
    AuthenticationError,
    DomainError,
    DomainValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
    ForbiddenError,
)

_STATUS_BY_ERROR: dict[type[DomainError], int] = {
    DomainValidationError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    EntityNotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateEntityError: status.HTTP_409_CONFLICT,
}


def to_http_exception(error: DomainError) -> HTTPException:
    status_code = status.HTTP_400_BAD_REQUEST
    for error_type, code in _STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            status_code = code
            break

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return HTTPException(status_code=status_code, detail=str(error), headers=headers)
