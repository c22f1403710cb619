"""Public store catalogue and the owner's own stores."""

from fastapi import APIRouter, Depends, Query

from app.application.schemas import (
    MyRatingResponse,
    PaginationMeta,
    StoreListResponse,
    StoreResponse,
    StoreWithUserRatingResponse,
)
from app.application.services import StoreQueryService
from app.domain.entities import DEFAULT_LIMIT, PageRequest, Principal, Role
from app.domain.exceptions import DomainError
from app.infrastructure.dependencies import (
    get_current_principal,
    get_store_query_service,
    require_roles,
)
from app.presentation.api.v1.errors import to_http_exception

router = APIRouter(prefix="/stores", tags=["Stores"])


@router.get("", response_model=StoreListResponse)
async def list_stores(
    page: int = Query(1),
    limit: int = Query(DEFAULT_LIMIT),
    search: str | None = Query(None),
    service: StoreQueryService = Depends(get_store_query_service),
) -> StoreListResponse:
    """Newest stores first, optionally filtered by name/email/address."""
    try:
        result = await service.list_stores(PageRequest.of(page, limit), search)
    except DomainError as e:
        raise to_http_exception(e)
    return StoreListResponse(
        stores=[StoreResponse.model_validate(s) for s in result.items],
        pagination=PaginationMeta.from_page(result),
    )


# Declared before /{store_id} so "mine" is not parsed as an id.
@router.get("/mine", response_model=list[StoreResponse])
async def list_my_stores(
    principal: Principal = Depends(require_roles(Role.STORE_OWNER)),
    service: StoreQueryService = Depends(get_store_query_service),
) -> list[StoreResponse]:
    stores = await service.list_owned_stores(principal.user_id)
    return [StoreResponse.model_validate(s) for s in stores]


@router.get("/{store_id}", response_model=StoreWithUserRatingResponse)
async def get_store(
    store_id: int,
    principal: Principal = Depends(get_current_principal),
    service: StoreQueryService = Depends(get_store_query_service),
) -> StoreWithUserRatingResponse:
    """A single store, with the caller's own rating when they left one."""
    try:
        view = await service.get_store(store_id, viewer_id=principal.user_id)
    except DomainError as e:
        raise to_http_exception(e)
    base = StoreResponse.model_validate(view.store).model_dump()
    return StoreWithUserRatingResponse(
        **base,
        user_rating=MyRatingResponse.model_validate(view.user_rating) if view.user_rating else None,
    )
