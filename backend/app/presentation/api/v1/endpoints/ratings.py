"""Rating endpoints nested under a store."""

from fastapi import APIRouter, Depends, status

from app.application.schemas import (
    MyRatingResponse,
    RatingCreate,
    RatingResponse,
    StoreIdentityResponse,
    StoreRatingsResponse,
    StoreSummaryResponse,
)
from app.application.services import RatingService
from app.domain.entities import Principal, Role
from app.domain.exceptions import DomainError
from app.infrastructure.dependencies import get_rating_service, require_roles
from app.presentation.api.v1.errors import to_http_exception

router = APIRouter(prefix="/stores/{store_id}", tags=["Ratings"])


@router.post("/ratings", response_model=RatingResponse, status_code=status.HTTP_201_CREATED)
async def submit_rating(
    store_id: int,
    data: RatingCreate,
    principal: Principal = Depends(require_roles(Role.USER)),
    service: RatingService = Depends(get_rating_service),
) -> RatingResponse:
    """Create the caller's rating for this store, or update the one they already have."""
    try:
        rating = await service.submit_rating(
            store_id=store_id,
            rater_id=principal.user_id,
            score=data.score,
            comment=data.comment,
        )
    except DomainError as e:
        raise to_http_exception(e)
    return RatingResponse.from_entity(rating)


@router.get("/my-rating", response_model=MyRatingResponse | None)
async def get_my_rating(
    store_id: int,
    principal: Principal = Depends(require_roles(Role.USER)),
    service: RatingService = Depends(get_rating_service),
) -> MyRatingResponse | None:
    try:
        rating = await service.get_my_rating(store_id, principal.user_id)
    except DomainError as e:
        raise to_http_exception(e)
    return MyRatingResponse.model_validate(rating) if rating else None


@router.get("/ratings", response_model=StoreRatingsResponse)
async def list_store_ratings(
    store_id: int,
    principal: Principal = Depends(require_roles(Role.STORE_OWNER, Role.ADMIN)),
    service: RatingService = Depends(get_rating_service),
) -> StoreRatingsResponse:
    """Every rating of the store, newest first. Owners see only their own stores."""
    try:
        result = await service.get_ratings_for_store(store_id, principal)
    except DomainError as e:
        raise to_http_exception(e)
    return StoreRatingsResponse(
        store=StoreIdentityResponse.model_validate(result.store),
        ratings=[RatingResponse.from_entity(r) for r in result.ratings],
    )


@router.get("/ratings/summary", response_model=StoreSummaryResponse)
async def get_store_summary(
    store_id: int,
    principal: Principal = Depends(require_roles(Role.STORE_OWNER, Role.ADMIN)),
    service: RatingService = Depends(get_rating_service),
) -> StoreSummaryResponse:
    try:
        summary = await service.get_store_summary(store_id, principal)
    except DomainError as e:
        raise to_http_exception(e)
    return StoreSummaryResponse(
        store=StoreIdentityResponse.model_validate(summary.store),
        avg_rating=summary.avg_rating,
        rating_count=summary.rating_count,
    )
