"""Abstract repository interface for server-side refresh tokens."""

from abc import ABC, abstractmethod

from app.domain.entities import RefreshToken


class RefreshTokenRepository(ABC):

    @abstractmethod
    async def get(self, token: str) -> RefreshToken | None:
        ...

    @abstractmethod
    async def create(self, refresh_token: RefreshToken) -> RefreshToken:
        ...

    @abstractmethod
    async def delete(self, token: str) -> bool:
        """Delete a token. Returns True if a row was removed, False if it was already gone."""
        ...
