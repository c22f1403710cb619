"""Abstract repository interface for stores."""

from abc import ABC, abstractmethod

from app.domain.entities import Page, PageRequest, Store, StoreDetail


class StoreRepository(ABC):
    """Port for store persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, store_id: int) -> Store | None:
        """Retrieve a single store (with owner identity) by ID."""
        ...

    @abstractmethod
    async def get_for_update(self, store_id: int) -> Store | None:
        """Retrieve a store and lock its row until the transaction ends.

        Concurrent callers for the same store block here, which is what keeps
        the read-modify-write of the rating aggregate free of lost updates.
        """
        ...

    @abstractmethod
    async def create(self, store: Store) -> Store:
        ...

    @abstractmethod
    async def save_aggregate(self, store: Store) -> Store:
        """Write ``avg_rating`` and ``rating_count`` back to the store row."""
        ...

    @abstractmethod
    async def search(
        self, page_request: PageRequest, *, search: str | None = None
    ) -> Page[Store]:
        """Newest-first page of stores matching name/email/address (case-insensitive)."""
        ...

    @abstractmethod
    async def list_by_owner(self, owner_id: int) -> list[Store]:
        ...

    @abstractmethod
    async def get_detail(self, store_id: int, recent: int = 10) -> StoreDetail | None:
        ...

    @abstractmethod
    async def count(self) -> int:
        ...
