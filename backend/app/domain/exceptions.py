"""Domain-specific exceptions — framework-independent."""


class DomainError(Exception):
    """Base class for every error a use case may surface to its caller."""


class EntityNotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(DomainError):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class DomainValidationError(DomainError):
    """Raised when input is malformed (score out of range, bad page number, ...)."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class AuthenticationError(DomainError):
    """Raised for bad credentials or a missing, expired or unknown token.

    The message is deliberately generic so callers cannot tell an unknown
    account from a wrong password.
    """

    def __init__(self, message: str = "Invalid credentials"):
        self.message = message
        super().__init__(message)


class ForbiddenError(DomainError):
    """Raised when a role or ownership check fails."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
