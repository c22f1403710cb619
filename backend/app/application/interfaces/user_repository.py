"""Abstract repository interface for users."""

from abc import ABC, abstractmethod

from app.domain.entities import Page, PageRequest, Role, User, UserDetail, UserOverview


class UserRepository(ABC):
    """Port for user persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        """Retrieve a single user by ID."""
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """Retrieve a single user by (unique) email."""
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user and return it with the generated ID.

        Raises:
            DuplicateEntityError: if the email is already registered.
        """
        ...

    @abstractmethod
    async def update_password(self, user: User) -> User:
        """Store the user's current password hash."""
        ...

    @abstractmethod
    async def search(
        self,
        page_request: PageRequest,
        *,
        search: str | None = None,
        role: Role | None = None,
    ) -> Page[UserOverview]:
        """Newest-first page of users matching name/email/address (case-insensitive)."""
        ...

    @abstractmethod
    async def get_detail(self, user_id: int, recent: int = 10) -> UserDetail | None:
        """A user with counts, their latest ratings and owned stores."""
        ...

    @abstractmethod
    async def count(self) -> int:
        ...
