"""Abstract repository interface for ratings."""

from abc import ABC, abstractmethod

from app.domain.entities import Rating


class RatingRepository(ABC):
    """Port for rating persistence. (user_id, store_id) is unique."""

    @abstractmethod
    async def get_for_user_and_store(self, user_id: int, store_id: int) -> Rating | None:
        ...

    @abstractmethod
    async def create(self, rating: Rating) -> Rating:
        """Insert a new rating; the returned rating carries its rater identity."""
        ...

    @abstractmethod
    async def update(self, rating: Rating) -> Rating:
        """Persist score/comment changes; the returned rating carries its rater identity."""
        ...

    @abstractmethod
    async def list_for_store(self, store_id: int) -> list[Rating]:
        """All ratings of a store, newest first, each with its rater identity."""
        ...

    @abstractmethod
    async def count(self) -> int:
        ...
