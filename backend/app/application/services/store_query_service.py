"""Read-side use cases for the public store catalogue."""

from dataclasses import dataclass

from app.application.interfaces import UnitOfWork
from app.domain.entities import Page, PageRequest, Rating, Store
from app.domain.exceptions import EntityNotFoundError


@dataclass
class StoreView:
    """A store as seen by one user, with that user's rating if they left one."""

    store: Store
    user_rating: Rating | None = None


def normalize_search(search: str | None) -> str | None:
    if search is None:
        return None
    search = search.strip()
    return search or None


class StoreQueryService:

    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def list_stores(
        self, page_request: PageRequest, search: str | None = None
    ) -> Page[Store]:
        async with self._uow as uow:
            return await uow.stores.search(page_request, search=normalize_search(search))

    async def get_store(self, store_id: int, viewer_id: int | None = None) -> StoreView:
        async with self._uow as uow:
            store = await uow.stores.get_by_id(store_id)
            if store is None:
                raise EntityNotFoundError("Store", store_id)
            user_rating = None
            if viewer_id is not None:
                user_rating = await uow.ratings.get_for_user_and_store(viewer_id, store_id)
        return StoreView(store=store, user_rating=user_rating)

    async def list_owned_stores(self, owner_id: int) -> list[Store]:
        async with self._uow as uow:
            return await uow.stores.list_by_owner(owner_id)
