"""Pydantic DTOs for the public store catalogue."""

from datetime import datetime

from pydantic import BaseModel

from .pagination import PaginationMeta
from .rating import MyRatingResponse
from .user import UserIdentityResponse


class StoreResponse(BaseModel):
    """Store in API responses, including its rating aggregate."""

    id: int
    name: str
    email: str | None
    address: str | None
    avg_rating: float
    rating_count: int
    created_at: datetime
    owner: UserIdentityResponse | None = None

    model_config = {"from_attributes": True}


class StoreWithUserRatingResponse(StoreResponse):
    """A store as seen by a signed-in user, with that user's own rating if any."""

    user_rating: MyRatingResponse | None = None


class StoreListResponse(BaseModel):
    stores: list[StoreResponse]
    pagination: PaginationMeta
